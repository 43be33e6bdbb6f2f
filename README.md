# samplekit

A collection of small, self-contained Python modules. Each one shows a
common pattern and can be used on its own: concurrent feed searching,
resource and worker pools, a task runner with a deadline, reader/writer
locking with a counting semaphore, JSON encoding and decoding, logger
setup, and a few tiny HTTP tools.

Only the standard library is needed at run time.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules at a glance

| Module | What it gives you |
| --- | --- |
| `samplekit.words` | `count_words(text)`: counts the whitespace-separated words in a text |
| `samplekit.feedsearch` | `Feed`, `Result`, `Matcher`, `DefaultMatcher`, `MatcherRegistry`, `register`, `get_matcher`, `retrieve_feeds`, `match`, `display`, `run`: searches a list of feeds concurrently |
| `samplekit.rss` | `parse_rss` and `RssMatcher`: fetches RSS feeds and matches titles and descriptions against a regular expression; importing the module registers the matcher for the `rss` feed type |
| `samplekit.feedapi` | `SearchResult`, `collect_results`, `make_app`, `serve`: a small WSGI API over the feed search at `/api/search?q=<term>` |
| `samplekit.handlers` | `send_json`, `routes`, `app`: a WSGI application; after `routes()` is called it answers `/sendjson` with a JSON document |
| `samplekit.pool` | `Pool`, `PoolClosedError`, `DbConnection`, `create_connection`: a bounded pool of reusable, closable resources |
| `samplekit.work` | `WorkPool`, `Worker`, `NamePrinter`: a fixed set of worker threads that run submitted tasks |
| `samplekit.fetch` | `fetch(url, *destinations)`: copies a URL's body to each destination, or to standard output if none is given |
| `samplekit.runner` | `Runner`, `RunnerTimeout`, `RunnerInterrupted`, `create_task`: runs tasks in order under a deadline |
| `samplekit.scheduling` | `alphabet`, `primes`, `print_alphabets`, `print_primes` |
| `samplekit.semaphore` | `Semaphore`, `ReaderWriter`, `start`, `shutdown`: many readers, one writer |
| `samplekit.channels` | thread hand-off helpers: `print_received`, `work_until_shutdown`, `play_tennis`, `relay_race`, `run_workers` |
| `samplekit.notify` | `Notifier`, `User`, `Admin`, `send_notification` |
| `samplekit.contacts` | `Contact`, `WebResponse`, `decode_contact`, `decode_mapping`, `encode_pretty`, `decode_web_response` |
| `samplekit.loggers` | `Loggers`, `create_loggers`: trace, info, warning and error loggers |
| `samplekit.pubsub` | `Publisher`, `PubSub`, `MockPublisher` |
| `samplekit.alerts` | `AlertCounter` and `new` |
| `samplekit.entities` | `Admin` |
| `samplekit.datacopy` | `copy`: moves data in batches from a `Puller` to a `Storer` |
| `samplekit.sharedcounter` | `AtomicCounter`, `unsafe_count`, `atomic_count`, `locked_count` |

## Examples

Counting words:

```python
from samplekit.words import count_words

count_words("the quick  brown\nfox")   # 4
```

Sharing resources through a pool:

```python
from samplekit.pool import Pool, create_connection

pool = Pool(create_connection, 2)
conn = pool.acquire()
try:
    ...  # use the connection
finally:
    pool.release(conn)
pool.close()
```

Once a pool is closed, `acquire` raises `PoolClosedError` and released
resources are closed rather than kept.

Running tasks under a deadline:

```python
from samplekit.runner import Runner, RunnerTimeout

runner = Runner(3.0)
runner.add(lambda task_id: print("task", task_id))
try:
    runner.start()
except RunnerTimeout:
    print("ran out of time")
```

Searching feeds:

```python
import samplekit.rss  # registers the "rss" matcher
from samplekit.feedsearch import run

results = run("python", "feeds.json")
```

## Commands

```
samplekit-wordcount notes.txt
samplekit-rss-search [term] [--data FILE]
samplekit-feed-api [--host HOST] [--port 8080] [--data FILE]
samplekit-sendjson [--host HOST] [--port 4000]
samplekit-fetch <url> [output]
samplekit-pool
samplekit-work
samplekit-runner
samplekit-scheduling [alphabets|primes]
samplekit-semaphore
samplekit-channels [receive|shutdown|tennis|relay|workers]
samplekit-notify
samplekit-contacts [struct|map|encode|web] [url]
samplekit-loggers
samplekit-pubsub
samplekit-alerts [value]
samplekit-entities
samplekit-datacopy
samplekit-counter [unsafe|atomic|locked]
```

`samplekit-rss-search` and `samplekit-feed-api` read their list of feeds
from a JSON data file (`data/data.json` by default). Each entry names a
`site`, a `link` and a `type`. Feeds whose type has no registered
matcher go to the default matcher, which finds nothing.

## What it does not do

- There is no module for querying several web search engines at once
  and gathering the first or all of their answers.
- `samplekit-feed-api` registers no matcher besides the default one, so
  on its own it finds nothing in RSS feeds. To serve RSS searches,
  import `samplekit.rss` in your own program and serve
  `samplekit.feedapi.make_app(...)` from there.
- `PubSub` delivers messages only within one process; it does not talk
  to a message broker over the network.