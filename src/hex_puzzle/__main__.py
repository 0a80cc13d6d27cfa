"""Module entrypoint for `python -m hex_puzzle`."""

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from hex_puzzle.play import play_puzzle


if __name__ == "__main__":
    play_puzzle()
