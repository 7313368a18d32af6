"""Entry point: python -m sprint_tasks"""

from sprint_tasks.cli import main

if __name__ == "__main__":
    main()
