"""Terminal styling, rust-analyzer project files and worked solutions for small Rust exercises."""

__version__ = "0.1.0"