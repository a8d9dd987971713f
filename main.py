#!/usr/bin/env python3
# Project-level .env in the working directory; never overrides the shell
from pathlib import Path

from dotenv import load_dotenv

from eliza_cli.cli import main

project_env = Path.cwd() / ".env"
if project_env.exists():
    load_dotenv(project_env, override=False)


if __name__ == "__main__":
    main()
