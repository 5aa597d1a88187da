"""Entry point for running the Riak exporter."""

from riak_exporter.cli import main

if __name__ == "__main__":
    main()
