[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samplekit"
version = "0.1.0"
description = "Small, self-contained building blocks for concurrency, feeds, JSON, logging and HTTP"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "worker-pool",
    "resource-pool",
    "semaphore",
    "rss",
    "feed-search",
    "json",
    "wsgi",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
samplekit-wordcount = "samplekit.words:main"
samplekit-rss-search = "samplekit.rss:main"
samplekit-feed-api = "samplekit.feedapi:main"
samplekit-sendjson = "samplekit.handlers:main"
samplekit-fetch = "samplekit.fetch:main"
samplekit-pool = "samplekit.pool:main"
samplekit-work = "samplekit.work:main"
samplekit-runner = "samplekit.runner:main"
samplekit-scheduling = "samplekit.scheduling:main"
samplekit-semaphore = "samplekit.semaphore:main"
samplekit-channels = "samplekit.channels:main"
samplekit-notify = "samplekit.notify:main"
samplekit-contacts = "samplekit.contacts:main"
samplekit-loggers = "samplekit.loggers:main"
samplekit-pubsub = "samplekit.pubsub:main"
samplekit-alerts = "samplekit.alerts:main"
samplekit-entities = "samplekit.entities:main"
samplekit-datacopy = "samplekit.datacopy:main"
samplekit-counter = "samplekit.sharedcounter:main"

[tool.hatch.build.targets.wheel]
packages = ["samplekit"]

[tool.hatch.build.targets.sdist]
include = ["samplekit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
