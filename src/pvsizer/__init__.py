"""pvsizer: residential PV sizing and savings estimator."""

__version__ = "0.1.0"
