"""
python -m vgnr enc KEY TEXT
python -m vgnr dec KEY TEXT
python -m vgnr              (worked examples)
"""

import argparse
import logging
import sys

from .errors import VigenereError
from .vigenere import Vigenere

logger = logging.getLogger("vgnr")

EXAMPLES = [
    ("lemon", "attackatdawn"),
    ("d",     "attackatdawn"),
    ("ABCD",  "CRYPTOISSHORTFORCRYPTOGRAPHY"),
]


def run_examples():
    for key, plaintext in EXAMPLES:
        scheme = Vigenere(key)
        ct = scheme.encrypt(plaintext)
        pt = scheme.decrypt(ct)
        assert pt == plaintext
        print(f"{'═'*60}")
        print(f"Key:        {scheme.keystream(len(plaintext))}")
        print(f"Plaintext:  {plaintext}")
        print(f"Ciphertext: {ct}")
        print(f"Round-trip: {pt} ✓")
    print(f"{'═'*60}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="vgnr", description="Vigenère cipher")
    parser.add_argument("mode", nargs="?", choices=["enc", "dec"])
    parser.add_argument("key", nargs="?")
    parser.add_argument("text", nargs="?")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=' %(message)s',
    )

    if args.mode is None:
        run_examples()
        return 0
    if args.key is None or args.text is None:
        parser.error("enc/dec need both KEY and TEXT")

    try:
        scheme = Vigenere(args.key)
        if args.mode == "enc":
            out = scheme.encrypt(args.text)
        else:
            out = scheme.decrypt(args.text)
    except VigenereError as e:
        logger.error(f"vgnr: {e}")
        return 2
    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
