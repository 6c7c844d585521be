# server/newsletter_titles/cli.py
"""
Terminal front-end for the generator.

    newsletter-titles "weekly roundup of indie game releases for PC players"
    newsletter-titles --copy 3 "..."
"""
import argparse
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from newsletter_titles.client import DEFAULT_BASE_URL, TitleClient
from newsletter_titles.session import Session, SessionStore
from newsletter_titles.view import GeneratorView, Toast

TOKEN_ENV = "NEWSLETTER_TITLES_TOKEN"
URL_ENV = "NEWSLETTER_TITLES_URL"

load_dotenv()

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_SIGNED_OUT = 2


class _Redirected(Exception):
    pass


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="newsletter-titles", description="Get 20 newsletter title suggestions.")
    p.add_argument("context", nargs="?", help="topic, audience, style or tone of the newsletter")
    p.add_argument("--url", default=os.getenv(URL_ENV, DEFAULT_BASE_URL), help="title service base URL")
    p.add_argument("--token", default=os.getenv(TOKEN_ENV), help=f"access token (default: ${TOKEN_ENV})")
    p.add_argument("--copy", type=int, metavar="N", help="copy title N (1-based) to the clipboard")
    return p


def print_toast(toast: Toast) -> None:
    prefix = "!" if toast.variant == "destructive" else "*"
    print(f"{prefix} {toast.title}: {toast.description}", file=sys.stderr)


def main(argv: Optional[List[str]] = None, client: Optional[TitleClient] = None) -> int:
    args = build_parser().parse_args(argv)

    sessions = SessionStore(Session(args.token) if args.token else None)
    client = client or TitleClient(args.url, access_token=args.token)

    def navigate(route: str) -> None:
        print(f"Not signed in. Set {TOKEN_ENV} or pass --token, then try again.", file=sys.stderr)
        raise _Redirected(route)

    view = GeneratorView(client, sessions, navigate=navigate, notify=print_toast)
    try:
        with view:
            context = args.context if args.context is not None else input("Newsletter context: ")
            if not view.submit(context):
                return EXIT_FAILED

            for index, title in view.rows:
                print(f"{index + 1}. {title}")

            if args.copy is not None:
                if not 1 <= args.copy <= len(view.titles):
                    print(f"--copy must be between 1 and {len(view.titles)}", file=sys.stderr)
                    return EXIT_FAILED
                view.copy_to_clipboard(view.titles[args.copy - 1])
    except _Redirected:
        return EXIT_SIGNED_OUT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
