import sys

from news_fetcher.cli import main

# Reads NEWS_API_KEY from the environment, or from a .env file holding
# NEWS_API_KEY=your-key in the current directory.
if __name__ == "__main__":
    sys.exit(main())
