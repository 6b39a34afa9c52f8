#!/usr/bin/env python3
"""Envia um e-mail de teste pela API Postmark.

Uso:
    POSTMARK_SERVER_TOKEN=... python scripts/send_email.py \
        --from sender@example.com --to receiver@example.com \
        --subject "Assunto" --text "Corpo"

Configuração lida do ambiente (ver config/settings/postmark.py).
"""

from __future__ import annotations

import argparse
import sys

import httpx

from api.connectors.postmark import Email, create_postmark_client
from config.logging import configure_logging
from config.settings import get_postmark_settings
from utils.errors import PostmarkClientError


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--from", dest="from_email", required=True)
    parser.add_argument("--to", required=True)
    parser.add_argument("--subject", default="Subject")
    parser.add_argument("--text", default="Body")
    parser.add_argument("--html")
    parser.add_argument("--tag")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(level=args.log_level)

    settings = get_postmark_settings()
    problems = settings.validate()
    if problems:
        for problem in problems:
            print(f"config: {problem}", file=sys.stderr)
        return 1

    email = Email(
        from_email=args.from_email,
        to=args.to,
        subject=args.subject,
        text_body=args.text,
        html_body=args.html,
        tag=args.tag,
    )

    with create_postmark_client(settings) as client:
        try:
            result, response = client.email.send(email)
        except PostmarkClientError as exc:
            print(f"Erro ao enviar e-mail: {exc}", file=sys.stderr)
            return 1
        except httpx.HTTPError as exc:
            print(f"Falha de transporte: {type(exc).__name__}: {exc}", file=sys.stderr)
            return 1

    print(
        f"E-mail enviado: to={result.to} message_id={result.message_id} "
        f"status={response.status_code}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
