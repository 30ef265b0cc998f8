"""
VocabPop application package: command-line entry point and logging setup.
"""

APP_NAME = "VocabPop"
APP_VERSION = "1.0.0"
