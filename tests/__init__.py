"""
EDI Ingestion - Test Suite

Test modules organized by functionality:
- unit/edi/ - Tokenizer, validators, classifier, dictionary, models, assembler, pipeline
- unit/ - Config, reporting and CLI tests
- edi/ - End-to-end pipeline scenarios
"""
