"""Infrastructure layer — bridges to third-party graph libraries.

This layer may import from domain. It must never import from output.
"""
