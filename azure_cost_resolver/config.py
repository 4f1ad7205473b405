#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config.py

Configuration constants and defaults for the Azure cost component resolver.

Key idea: filters are built against the price catalog's own naming
------------------------------------------------------------------
Every cost component carries a ProductFilter / PriceFilter pair that the
(external) price catalog resolves to a unit price. The vendor, purchase option
and tier start values below are the literal strings the catalog stores, so
they are kept here instead of being repeated in every resource model.
"""

import os  # Standard library: access environment variables (os.getenv).

# ---------------------------------------------------------------------
# Price catalog naming
# ---------------------------------------------------------------------
# VENDOR_NAME:
# - vendorName attribute of every Azure product in the catalog.
VENDOR_NAME = "azure"

# DEFAULT_PURCHASE_OPTION:
# - Pay-as-you-go prices are stored under the "Consumption" purchase option.
DEFAULT_PURCHASE_OPTION = "Consumption"

# DEFAULT_START_USAGE_AMOUNT:
# - First pricing tier. Tiered meters carry one price per startUsageAmount.
DEFAULT_START_USAGE_AMOUNT = "0"

# ---------------------------------------------------------------------
# Usage file
# ---------------------------------------------------------------------
# USAGE_FILE:
# - Default path of the YAML usage file. Empty means "no usage supplied".
# - Can be overridden via env var AZURECOST_USAGE_FILE.
USAGE_FILE = os.getenv("AZURECOST_USAGE_FILE", "").strip()

# MIN_USAGE_FILE_VERSION / MAX_USAGE_FILE_VERSION:
# - Inclusive range of usage file versions this release understands.
# - Only "0.1" exists today, so both bounds are equal.
MIN_USAGE_FILE_VERSION = "0.1"
MAX_USAGE_FILE_VERSION = "0.1"

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
# LOG_LEVEL:
# - Level used by utils.log.configure_logging when none is passed.
# - Can be overridden via env var AZURECOST_LOG_LEVEL.
LOG_LEVEL = os.getenv("AZURECOST_LOG_LEVEL", "INFO")

# LOG_FORMAT:
# - Same layout for the console handler and the optional file handler.
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
