"""
Test suite for typed_identifier

- Scheme model, loader and registry tests
- Engine tests: normalizer, validator, classifier, canonical keys, resolver
- Uniqueness index and settings/logging tests
"""
