"""Bitcoin value conversion, an RPN calculator and a merge-insertion sorter."""

__version__ = "0.1.0"