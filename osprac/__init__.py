"""Operating-systems exercises: CPU scheduling, memory allocation, processes and threads, file I/O and system information."""

__version__ = "0.1.0"
__all__ = ["scheduling", "memory", "processes", "fileio", "sysinfo"]