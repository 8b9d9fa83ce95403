#!/usr/bin/env python3
"""Run the demonstration games and report whether each one scores as expected."""

from __future__ import annotations

import sys

from tenpin.scenarios import main


if __name__ == "__main__":
    sys.exit(main())
