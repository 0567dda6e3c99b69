"""
Validation functions for node identifiers supplied by callers
"""

import numbers

from hopgraph.common.defaults import ResourceLimits


class ValidationError(ValueError):
    """Raised when input validation fails"""

    pass


class InputValidator:
    """
    Provides input validation methods for graph inputs
    """

    @classmethod
    def validate_node_id(cls, node, max_node_id=None):
        """
        Validate a node identifier

        Node ids are non-negative integers. Booleans are rejected even though
        they subclass int, and integral values of other numeric types (numpy
        integers, for instance) are normalised to plain int

        Args:
            node: Candidate node identifier
            max_node_id (int): Optional upper bound, defaults to ResourceLimits.MAX_NODE_ID.
                No bound is applied when both are None

        Returns:
            The validated identifier as an int

        Raises:
            ValidationError: If validation fails
        """
        if isinstance(node, bool) or not isinstance(node, numbers.Integral):
            raise ValidationError(f"Node id must be a non-negative integer, got {type(node).__name__}: {node!r}")

        node = int(node)
        if node < 0:
            raise ValidationError(f"Node id must be non-negative: {node}")

        limit = ResourceLimits.MAX_NODE_ID if max_node_id is None else max_node_id
        if limit is not None and node > int(limit):
            raise ValidationError(f"Node id too large: {node} > {limit}")

        return node
