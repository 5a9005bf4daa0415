#!/usr/bin/env python3
"""
Monty Hall - stay versus switch, settled by simulation
"""

from montyhall.cli.__main__ import main


if __name__ == '__main__':
    main()
