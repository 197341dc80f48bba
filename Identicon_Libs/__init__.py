"""
Identicon_Libs - Identicon generation library modules

This package contains core functionality for the identicon generator,
organized into specialized sub-packages:

- IdenticonLib: Image record model and the pure derivation stages
- HashLib: Registry of digest functions used to seed the pipeline
- OutputLib: Rasterization to PNG and persistence to disk
- PipelineLib: Configuration and the orchestrating pipeline
"""

__version__ = "0.1.0"
