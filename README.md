# handson

A collection of small, self-contained programs that are handy for learning
and for everyday use. Each one comes with a command and an importable module.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Commands

### handson-greeting

Prints a greeting that depends on the current hour:

| Time          | Message    |
|---------------|------------|
| 04:00 – 09:59 | おはよう   |
| 10:00 – 16:59 | こんにちは |
| 17:00 – 03:59 | こんばんは |

```
handson-greeting
```

From Python, `handson.greeting.Greeting` takes an optional `clock` (a
callable returning a `datetime`) so the time can be fixed, and
`Greeting.do(writer)` writes the message to any text stream. The message
language is a `Lang` (`Lang.JAPANESE`, the default, or `Lang.ENGLISH`);
`use_lang(lang)` switches it for the duration of a `with` block, and
`message_for_hour(hour, lang)` returns the message for a given hour.

### handson-echo

Reads lines from standard input and echoes each one back after a `>`
prompt, until the input ends.

```
handson-echo
```

From Python, `handson.echo.read_lines(stream)` yields the lines of a
stream without their line endings, and `echo(stream, out)` does the
prompting and echoing between any two text streams.

### handson-numberlines

Copies a text file, putting the line number and a colon in front of each
line.

```
handson-numberlines source.txt numbered.txt
```

From Python, `handson.numberlines.number_lines(src, dst)` does the same
and returns the number of lines written.

### handson-httpget

Fetches a URL and writes the response body to standard output. Error
statuses are not treated as failures; their body is written as well.

```
handson-httpget http://localhost:8080/
```

From Python, `handson.httpget.fetch(url, out)` copies the body to a binary
stream and returns the number of bytes copied.

### handson-guestbook

A small web guestbook. The front page shows a form for a name and a
message, followed by the ten most recent messages, newest first. Posting
without a name or message stores "NO NAME" or "NO MESSAGE" instead.

```
handson-guestbook --host 127.0.0.1 --port 8080
```

`handson.guestbook.create_app(store)` builds the web application around
any `MessageStore`, which is useful for embedding or testing.
`MessageStore.put(message)` stores a `Message` and `MessageStore.latest(limit)`
returns the newest ones.

### handson-slackbot

A chat bot that answers mentions with こんにちは. When a mention contains
占い, it offers a blood-type fortune: pick A, B, O or AB and it replies
with today's fortune and lucky colour. The same blood type gets the same
fortune for the whole day. The bot's tokens are read from the environment
variables `SLACK_BOT_TOKEN` and `SLACK_VERIFY_TOKEN`.

```
handson-slackbot --host 127.0.0.1 --port 8080
```

It serves `/events` for event callbacks (including URL verification) and
`/interaction` for interactive-message callbacks. From Python,
`handson.slackbot.create_app(post_message, verify_token)` builds the
application around any function that posts a message to a channel;
`blood_type_prompt()`, `blood_type_fortune(blood_type, today)`,
`response_message(message, title, value)` and
`handle_interaction(body, verify_token, today)` are available on their own.

## What this package does not do

- There is no image converter: nothing here decodes, clips, resizes or
  re-encodes PNG or JPEG files.
- The guestbook keeps its messages in memory only; they are lost when the
  server stops.