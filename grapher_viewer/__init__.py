"""PyQt5 viewer hosting the interactive graph engine."""
