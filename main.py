"""Run ember-goto from a source checkout without installing it."""

from ember_goto.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
