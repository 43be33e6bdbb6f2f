import pytest

from samplekit.entities import Admin, main


def test_user_details_start_empty():
    admin = Admin(rights=10)
    assert (admin.name, admin.email, admin.rights) == ("", "", 10)


def test_user_details_can_be_set_after_creation():
    admin = Admin(rights=10)
    admin.name = "Bill"
    admin.email = "bill@example.com"
    assert admin.name == "Bill"
    assert admin.email == "bill@example.com"


def test_user_details_cannot_be_given_at_creation():
    with pytest.raises(TypeError):
        Admin(rights=10, name="Bill")


def test_equality_includes_user_details():
    first, second = Admin(rights=1), Admin(rights=1)
    first.name = "Bill"
    assert first != second
    second.name = "Bill"
    assert first == second


def test_repr_shows_all_details():
    admin = Admin(rights=10)
    admin.name = "Bill"
    text = repr(admin)
    assert "'Bill'" in text and "rights=10" in text


def test_main_prints_admin(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("User: ")
    assert "'Bill'" in out