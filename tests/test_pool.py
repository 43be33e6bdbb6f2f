import pytest

from samplekit.pool import DbConnection, Pool, PoolClosedError, create_connection


class FakeResource:
    def __init__(self):
        self.closed = 0

    def close(self):
        self.closed += 1


def test_size_must_be_positive():
    with pytest.raises(ValueError, match="Size value too small."):
        Pool(FakeResource, 0)


def test_acquire_creates_when_empty():
    made = []

    def factory():
        made.append(FakeResource())
        return made[-1]

    pool = Pool(factory, 2)
    resource = pool.acquire()
    assert made == [resource]


def test_released_resource_is_reused():
    pool = Pool(FakeResource, 1)
    first = pool.acquire()
    pool.release(first)
    assert pool.acquire() is first
    assert first.closed == 0


def test_release_when_full_closes_resource():
    pool = Pool(FakeResource, 1)
    kept, extra = pool.acquire(), pool.acquire()
    pool.release(kept)
    pool.release(extra)
    assert (kept.closed, extra.closed) == (0, 1)


def test_close_closes_pooled_resources_once():
    pool = Pool(FakeResource, 2)
    resources = [pool.acquire(), pool.acquire()]
    for resource in resources:
        pool.release(resource)
    pool.close()
    pool.close()
    assert [resource.closed for resource in resources] == [1, 1]


def test_acquire_after_close_raises():
    pool = Pool(FakeResource, 1)
    pool.close()
    with pytest.raises(PoolClosedError, match="Pool has been closed."):
        pool.acquire()


def test_release_after_close_closes_resource():
    pool = Pool(FakeResource, 1)
    resource = pool.acquire()
    pool.close()
    pool.release(resource)
    assert resource.closed == 1


def test_factory_error_propagates():
    def factory():
        raise OSError("cannot connect")

    with pytest.raises(OSError, match="cannot connect"):
        Pool(factory, 1).acquire()


def test_connection_ids_increase():
    first, second = create_connection(), create_connection()
    assert isinstance(first, DbConnection)
    assert second.id > first.id