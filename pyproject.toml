[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handson"
version = "0.1.0"
description = "Small hands-on programs: time-based greetings, line echo and numbering, a URL fetcher, a guestbook and a fortune-telling chat bot"
requires-python = ">=3.10"
keywords = ["greeting", "echo", "line-numbers", "http", "guestbook", "chatbot", "hands-on", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Education",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
handson-greeting = "handson.greeting:main"
handson-echo = "handson.echo:main"
handson-numberlines = "handson.numberlines:main"
handson-httpget = "handson.httpget:main"
handson-guestbook = "handson.guestbook:main"
handson-slackbot = "handson.slackbot:main"

[tool.hatch.build.targets.wheel]
packages = ["handson"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
