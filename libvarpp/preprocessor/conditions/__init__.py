from .branch import ConditionalBranch
from .stack import ConditionalBlocksStack

__all__ = ["ConditionalBlocksStack", "ConditionalBranch"]
