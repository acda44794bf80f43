#!/usr/bin/env python3
"""Gera o valor do header de assinatura para um corpo de webhook.

Uso:
    python scripts/sign_payload.py --key segredo --file body.json
    echo -n '{"k":1}' | python scripts/sign_payload.py --key segredo

Imprime `sha256=<hex>`, pronto para o header configurado na rota
(default: x-signature).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from app.infra.crypto import SIGNATURE_ALGORITHM, compute_signature


def sign(body: bytes, key: str, *, prefix: bool = True) -> str:
    signature = compute_signature(body, key)
    return f"{SIGNATURE_ALGORITHM}={signature}" if prefix else signature


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--key", required=True, help="Chave HMAC da rota.")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Arquivo com o corpo. Se omitido, lê stdin.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Imprime só o hex, sem o prefixo do algoritmo.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    body = args.file.read_bytes() if args.file else sys.stdin.buffer.read()
    print(sign(body, args.key, prefix=not args.raw))


if __name__ == "__main__":
    main()
