"""Core of polytrans: the credential cache, the backend contract, the backends and the orchestrator.

Subpackages are imported explicitly (``polytrans.core.cache``, ``polytrans.core.trans``).
"""
