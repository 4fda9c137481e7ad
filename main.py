#!/usr/bin/env python3
"""RingTimer — entry point.

Run with:
    python main.py
    python -m ringtimer
"""

from ringtimer.__main__ import main


if __name__ == "__main__":
    main()
