"""Run Classic Pong with ``python -m classic_pong``."""

from classic_pong.app import run

if __name__ == "__main__":
    run()
