from __future__ import annotations
import os

OUTPUT_FILE = os.environ.get("PROMOTECI_OUTPUT_FILE", "deploy-pipeline.yaml")
CONFIG_FILE = os.environ.get("PROMOTECI_CONFIG_FILE") or None
