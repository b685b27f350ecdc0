"""hcc code generation backends.

Lowers architecture-neutral operations into textual assembly for HyperCPU and QProc targets.
"""
