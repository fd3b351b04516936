"""Utilities package"""
from .config import config, Config
from .logger import logger
from .performance import monitor, PerformanceMonitor

__all__ = ["config", "Config", "logger", "monitor", "PerformanceMonitor"]
