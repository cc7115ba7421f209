"""
Main entry point for prompt-optimizer

This allows running the CLI with: python -m prompt_optimizer
"""
from .cli import main

if __name__ == "__main__":
    main()
