"""Allow running the parser with ``python -m vault_parser``."""
from vault_parser.main import run

if __name__ == "__main__":
    run()
