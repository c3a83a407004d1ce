"""Allow ``python -m docker_ip_retrieval``."""
from docker_ip_retrieval.interfaces.cli.main import entry_point

if __name__ == "__main__":
    entry_point()
