# Python 3.9+
# Script entry: `python count_tags.py [options] DIRECTORY`
from __future__ import annotations

from tagcount.cli import main

if __name__ == "__main__":
    main()
