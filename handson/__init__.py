"""Small hands-on programs: greetings, line echo and numbering, a URL fetcher, a guestbook and a chat bot."""

__version__ = "0.1.0"