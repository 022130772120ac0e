#!/usr/bin/env python3
"""
malreader entry point.

Usage: python repl.py [--prompt PROMPT] [--history FILE] [--echo] [--verbose]
"""

from malreader.repl import main

if __name__ == '__main__':
    main()
