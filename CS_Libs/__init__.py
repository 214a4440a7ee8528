"""
CS_Libs - Color Swapper Library Modules

This package contains core functionality for the Color Swapper project,
organized into specialized sub-packages:

- ColorPairLib: Color values and the ordered store of source/target pairs
- MatrixLib: Least-squares channel mixer solver and result formatting
- ChannelMixerLib: Host documents that receive the computed matrix
- SessionLib: Orchestration of store, solver and host with user messages
"""

__version__ = "0.1.0"
