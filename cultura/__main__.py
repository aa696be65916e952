"""Main entry point for CULTURA when run as a module"""

# ── Must run BEFORE any third-party imports ─────────────────────────────────
import logging
import sys

# Force UTF-8 output on Windows (Assamese and Meetei Mayek scripts)
if sys.stdout.encoding and sys.stdout.encoding.lower() not in ('utf-8', 'utf8'):
    try:
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')
    except AttributeError:
        pass

# ── Root logger ──────────────────────────────────────────────────────────────
logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')

# ── Silence specific verbose libraries ──────────────────────────────────────
for _noisy in ('urllib3', 'httpx', 'httpcore', 'anthropic'):
    logging.getLogger(_noisy).setLevel(logging.ERROR)

from cultura.cli import main

if __name__ == '__main__':
    sys.exit(main())
