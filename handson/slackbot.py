"""A chat bot that answers mentions and tells blood-type fortunes."""

from __future__ import annotations

import argparse
import copy
import json
import os
import random
import sys
import urllib.parse
import urllib.request
from collections.abc import Callable
from datetime import date, datetime, time
from typing import Any

from flask import Flask, Response, jsonify, request

PostMessage = Callable[[str, str, list], None]

_PAYLOAD_PREFIX_LEN = len("payload=")
_BLOOD_TYPE_FACTORS = {"A": 1, "B": 2, "AB": 3, "O": 4}
_COLORS = ("赤", "青", "黄色", "緑", "黒", "ピンク")
_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"

PROMPT_TITLE = "★★★血液型占い★★★"
RESULT_TITLE = "★占い結果★"
GREETING = "こんにちは"


def blood_type_prompt() -> tuple[str, list[dict[str, Any]]]:
    """Return the text and attachments that ask for a blood type."""
    attachment = {
        "text": "血液型を教えてください",
        "callback_id": "select_blood_type",
        "actions": [
            {
                "name": "select",
                "type": "select",
                "options": [
                    {"text": kind, "value": kind} for kind in ("A", "B", "O", "AB")
                ],
            },
            {
                "name": "cancel",
                "text": "キャンセル",
                "type": "button",
                "style": "danger",
            },
        ],
    }
    return PROMPT_TITLE, [attachment]


def _day_seed(today: date) -> int:
    return int(datetime.combine(today, time()).timestamp())


def blood_type_fortune(blood_type: str, today: date | None = None) -> str:
    """Return today's fortune for ``blood_type``; the same day gives the same result."""
    day = today if today is not None else date.today()
    rnd = random.Random(_day_seed(day) * _BLOOD_TYPE_FACTORS.get(blood_type, 0))

    lines = ["今日の運勢は...\n"]
    luck = rnd.randrange(6)
    if luck == 0:
        lines.append("残念...:fearful:「凶」です。\n")
    elif luck in (1, 2):
        lines.append("「吉」です。\n")
    elif luck in (3, 4):
        lines.append("「中吉」です。\n")
    else:
        lines.append("おめでとうございます:tada:「大吉」です。\n")
    lines.append("\n")
    lines.append(f"今日のラッキーカラーは{_COLORS[rnd.randrange(len(_COLORS))]}です。")
    lines.append("今日も一日がんばりましょう:muscle:\n")
    return "".join(lines)


def response_message(message: dict[str, Any], title: str, value: str) -> dict[str, Any]:
    """Return a copy of ``message`` whose first attachment shows a single field."""
    result = copy.deepcopy(message)
    attachments = result.get("attachments") or []
    if not attachments:
        raise ValueError("message has no attachments")
    attachments[0]["actions"] = []
    attachments[0]["fields"] = [{"title": title, "value": value, "short": False}]
    result["response_type"] = "in_channel"
    return result


def handle_interaction(
    body: str, verify_token: str, today: date | None = None
) -> dict[str, Any]:
    """Answer an interactive-message callback sent as ``payload=<json>``.

    Raises ``PermissionError`` for a wrong token and ``ValueError`` for a
    malformed payload or an unknown action.
    """
    json_str = urllib.parse.unquote_plus(body[_PAYLOAD_PREFIX_LEN:])
    try:
        message = json.loads(json_str)
    except json.JSONDecodeError as err:
        raise ValueError(f"{err}: {json_str}") from err
    if not isinstance(message, dict):
        raise ValueError(f"unexpected payload: {json_str}")

    if message.get("token") != verify_token:
        raise PermissionError(f"invalid token: {message.get('token')}")

    try:
        action = message["actions"][0]
        name = action["name"]
        original = message.get("original_message", {})
        if name == "select":
            result = blood_type_fortune(action["selected_options"][0]["value"], today)
            return response_message(original, RESULT_TITLE, result)
        if name == "cancel":
            title = f":x: @{message['user']['name']} キャンセルされました"
            return response_message(original, title, "")
    except (KeyError, IndexError, TypeError) as err:
        raise ValueError(f"malformed interaction: {err}") from err
    raise ValueError(f"不正なアクション: {action}")


def _handle_event(event: dict[str, Any], post_message: PostMessage) -> None:
    if event.get("type") != "app_mention":
        return
    channel = event.get("channel", "")
    if "占い" in event.get("text", ""):
        text, attachments = blood_type_prompt()
        post_message(channel, text, attachments)
    else:
        post_message(channel, GREETING, [])


def create_app(post_message: PostMessage, verify_token: str) -> Flask:
    """Build the bot's web application; ``post_message`` sends to a channel."""
    app = Flask(__name__)

    @app.route("/events", methods=["POST"])
    def events() -> Response | tuple[str, int]:
        body = request.get_data(as_text=True)
        try:
            evt = json.loads(body)
            if not isinstance(evt, dict):
                raise ValueError("event is not an object")
            if evt.get("token") != verify_token:
                raise ValueError("invalid verification token")
        except ValueError as err:
            app.logger.error("ParseEvent: %s", err)
            return str(err), 500

        kind = evt.get("type")
        if kind == "url_verification":
            return Response(str(evt.get("challenge", "")), mimetype="text/plain")

        if kind == "event_callback":
            try:
                _handle_event(evt.get("event") or {}, post_message)
            except Exception as err:  # noqa: BLE001 - reported to the caller
                app.logger.error("%s", err)
                return str(err), 500
        return Response("", mimetype="text/plain")

    @app.route("/interaction", methods=["POST"])
    def interaction() -> Response | tuple[str, int]:
        body = request.get_data(as_text=True)
        try:
            answer = handle_interaction(body, verify_token)
        except PermissionError as err:
            app.logger.error("%s", err)
            return "", 401
        except ValueError as err:
            app.logger.error("%s", err)
            return "", 500
        return jsonify(answer)

    return app


def _slack_poster(bot_token: str) -> PostMessage:
    def post(channel: str, text: str, attachments: list) -> None:
        data = json.dumps(
            {"channel": channel, "text": text, "attachments": attachments}
        ).encode("utf-8")
        req = urllib.request.Request(
            _POST_MESSAGE_URL,
            data=data,
            headers={
                "Content-Type": "application/json; charset=utf-8",
                "Authorization": f"Bearer {bot_token}",
            },
        )
        with urllib.request.urlopen(req) as response:
            result = json.load(response)
        if not result.get("ok"):
            raise RuntimeError(result.get("error", "post failed"))

    return post


def main(argv: list[str] | None = None) -> int:
    """Serve the bot with tokens from SLACK_BOT_TOKEN and SLACK_VERIFY_TOKEN."""
    parser = argparse.ArgumentParser(prog="slackbot")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    options = parser.parse_args(sys.argv[1:] if argv is None else argv)
    app = create_app(
        _slack_poster(os.environ.get("SLACK_BOT_TOKEN", "")),
        os.environ.get("SLACK_VERIFY_TOKEN", ""),
    )
    app.run(host=options.host, port=options.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())