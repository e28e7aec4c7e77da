#!/usr/bin/env python3
"""
TEXT SHMUP Launcher
====================
Run this script to start the game.
"""

from shmup.main import main

if __name__ == "__main__":
    main()
