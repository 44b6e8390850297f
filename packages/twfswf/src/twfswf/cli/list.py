from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, env_salt, load_recovery_config
from ..api import list_archive, write_names
from twfscodec import TwfsError

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="twfs - list the file names stored in an encrypted .dat archive")
    p.add_argument("archive", help="Archive file (.dat)")
    p.add_argument("--salt", default=env_salt(),
                   help="Known salt (default: $TWFS_SALT). Without it, the known salts are tried in order")
    p.add_argument("--salts-file", default=None,
                   help="Candidate salts, one per line (default: $TWFS_SALTS_FILE, else built-in list)")
    p.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    try:
        cfg = load_recovery_config(args.salts_file)
        names = list_archive(args.archive, salt=args.salt, config=cfg)
        write_names(names, args.output)
    except (TwfsError, OSError, ValueError) as e:
        logging.error("%s: %s", args.archive, e)
        return 1
    except Exception as e:
        logging.exception("Échec list %s: %s", args.archive, e)
        return 1
    logging.info("→ %d noms", len(names))
    return 0

if __name__ == "__main__":
    sys.exit(main())
