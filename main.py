#!/usr/bin/env python3
"""
dicedist - Exact probability distributions of dice sums
"""

from dicedist.cli.interface import DistributionCLI


def main():
    """Main entry point for dicedist."""
    cli = DistributionCLI()
    cli.run()


if __name__ == '__main__':
    main()
