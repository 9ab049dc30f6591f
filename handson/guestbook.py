"""A small guest book web application with an in-memory message store."""

from __future__ import annotations

import argparse
import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime

from flask import Flask, Response, redirect, render_template_string, request

LIMIT_MESSAGES = 10

_INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
	<head>
		<title>ゲストブック</title>
	</head>
	<body>
	<form action="/post">
		<input type="text" name="name" placeholder="お名前">
		<input type="text" name="message" placeholder="メッセージ">
		<input type="submit">
	</form>
	<div class="messages">{% for msg in messages %}
		<div class="message">
			<h2 class="message-name">{{ msg.name }}</h2>
			<p class="message-text">{{ msg.text }}</p>
		</div>
	{% endfor %}</div>
	</body>
</html>"""


@dataclass(frozen=True)
class Message:
    """A message posted to the guest book."""

    name: str
    text: str
    created_at: datetime = field(default_factory=datetime.now)


class MessageStore:
    """Thread-safe in-memory storage of guest book messages."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: dict[int, Message] = {}
        self._next_key = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def put(self, message: Message) -> int:
        """Store ``message`` and return the key it was given."""
        with self._lock:
            key = self._next_key
            self._next_key += 1
            self._messages[key] = message
            return key

    def latest(self, limit: int = LIMIT_MESSAGES) -> list[Message]:
        """Return at most ``limit`` messages, newest first."""
        with self._lock:
            ordered = sorted(
                self._messages.items(),
                key=lambda item: (item[1].created_at, item[0]),
                reverse=True,
            )
        return [message for _, message in ordered[: max(limit, 0)]]


def create_app(store: MessageStore | None = None) -> Flask:
    """Build the guest book application backed by ``store``."""
    messages = store if store is not None else MessageStore()
    app = Flask(__name__)

    @app.route("/")
    def index() -> str:
        return render_template_string(
            _INDEX_TEMPLATE, messages=messages.latest(LIMIT_MESSAGES)
        )

    @app.route("/post", methods=["GET", "POST"])
    def post() -> Response:
        name = request.values.get("name", "") or "NO NAME"
        text = request.values.get("message", "") or "NO MESSAGE"
        messages.put(Message(name=name, text=text))
        return redirect("/", code=302)

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the guest book over HTTP."""
    parser = argparse.ArgumentParser(prog="guestbook")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    options = parser.parse_args(sys.argv[1:] if argv is None else argv)
    create_app().run(host=options.host, port=options.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())