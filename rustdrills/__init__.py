"""A runner that compiles, tests and watches small Rust exercises, with worked solutions."""

__version__ = "0.1.0"