"""
Constants for EDI X12 ingestion

This module contains the envelope segment tags, the default segment
dictionary table, and the transaction set code labels used by the
tokenizer, validators and classifier.
"""

from types import MappingProxyType
from typing import Mapping


# ===========================
# Envelope Tags
# ===========================

ISA = "ISA"  # Interchange Control Header
IEA = "IEA"  # Interchange Control Trailer
GS = "GS"    # Functional Group Header
GE = "GE"    # Functional Group Trailer
ST = "ST"    # Transaction Set Header
SE = "SE"    # Transaction Set Trailer
DTM = "DTM"  # Date/Time Reference

# Headers that must carry at least one element
MANDATORY_ENVELOPE_TAGS = frozenset([ISA, GS, ST])

# header -> trailer, outermost first
ENVELOPE_PAIRS: Mapping[str, str] = MappingProxyType({
    ISA: IEA,
    GS: GE,
    ST: SE,
})

# Synthetic tag for document-level diagnostics
FILE_SEGMENT_TAG = "FILE"


# ===========================
# Delimiters
# ===========================

DEFAULT_SEPARATORS = frozenset(["~", "*", "|"])


# ===========================
# Segment Dictionary
# ===========================

UNKNOWN_SEGMENT_DESCRIPTION = "Unknown Segment"

DEFAULT_SEGMENT_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    'ISA': 'Interchange Control Header',
    'GS': 'Functional Group Header',
    'ST': 'Transaction Set Header',
    'BEG': 'Beginning Segment for Purchase Order',
    'REF': 'Reference Identification',
    'DTM': 'Date/Time Reference',
    'N1': 'Name',
    'N3': 'Address Information',
    'N4': 'Geographic Location',
    'PO1': 'Baseline Item Data',
    'PID': 'Product/Item Description',
    'CTT': 'Transaction Totals',
    'SE': 'Transaction Set Trailer',
    'GE': 'Functional Group Trailer',
    'IEA': 'Interchange Control Trailer',
    'BSN': 'Beginning Segment for Ship Notice',
    'HL': 'Hierarchical Level',
    'TD1': 'Carrier Details (Quantity and Weight)',
    'TD5': 'Carrier Details (Routing Sequence/Transit Time)',
    'TD3': 'Carrier Details (Equipment)',
    'BIG': 'Beginning Segment for Invoice',
    'IT1': 'Baseline Item Data (Invoice)',
    'TDS': 'Total Monetary Value Summary',
    'CAD': 'Carrier Detail',
    'SAC': 'Service, Promotion, Allowance, or Charge Information',
})


# ===========================
# Transaction Sets
# ===========================

UNKNOWN_TRANSACTION_TYPE = "Unknown"

TRANSACTION_SET_LABELS: Mapping[str, str] = MappingProxyType({
    '850': 'Purchase Order',
    '856': 'Ship Notice/Manifest',
    '810': 'Invoice',
    '997': 'Functional Acknowledgment',
})
