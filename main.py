#!/usr/bin/env python3
"""
Loyalty Wallet - Main Entry Point

A desktop application for keeping loyalty cards in one place and showing
each one as a scannable barcode.
"""

from src.loyalty_wallet.main import main

if __name__ == "__main__":
    main()
