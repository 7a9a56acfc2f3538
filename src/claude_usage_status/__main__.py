"""Enable running claude-usage-status as a module: python -m claude_usage_status."""

from claude_usage_status.cli import main

if __name__ == "__main__":
    main()
