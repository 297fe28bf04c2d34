"""
Embedding-based heuristic: semantic distance between a node and the goal.

Useful for graphs whose nodes have meaningful names (e.g. Wikipedia
article titles), where pages about related topics tend to link to each
other. The estimate is not admissible in general, so paths found with it
are good rather than guaranteed optimal.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Hashable, Sequence

import numpy as np

from lazypath.config import DEFAULT_EMBEDDING_MODEL, EMBEDDING_HEURISTIC_SCALE

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)

# Encodes a batch of node labels into a (len(batch), dim) array
Encoder = Callable[[Sequence[str]], np.ndarray]


class EmbeddingHeuristic:
    """
    Estimates remaining cost as the cosine distance to the goal's embedding.

    h(node) = scale * max(0, 1 - cos(embed(node), embed(goal)))

    The start argument of the estimator signature is ignored; the goal is
    bound at construction. Embeddings are cached per node for the lifetime
    of the heuristic instance.
    """

    def __init__(
        self,
        goal: Hashable,
        encode: Encoder,
        scale: float = EMBEDDING_HEURISTIC_SCALE,
    ) -> None:
        """
        Initialize the heuristic.

        Args:
            goal: Goal node the estimate measures distance to
            encode: Batch encoder mapping node labels to embedding rows
            scale: Multiplier applied to the cosine distance
        """
        self._goal = goal
        self._encode = encode
        self._scale = scale
        self._cache: dict[Hashable, np.ndarray] = {}

    @classmethod
    def from_sentence_transformer(
        cls,
        goal: Hashable,
        model_name: str = DEFAULT_EMBEDDING_MODEL,
        scale: float = EMBEDDING_HEURISTIC_SCALE,
    ) -> EmbeddingHeuristic:
        """Build a heuristic backed by a sentence-transformers model."""
        from sentence_transformers import SentenceTransformer

        logger.info(f"Loading sentence-transformer model '{model_name}'...")
        model: SentenceTransformer = SentenceTransformer(model_name)

        def encode(texts: Sequence[str]) -> np.ndarray:
            return model.encode(list(texts), convert_to_numpy=True)

        return cls(goal, encode, scale=scale)

    @property
    def goal(self) -> Hashable:
        return self._goal

    def _normalized(self, node: Hashable) -> np.ndarray:
        """Unit-length embedding of a node (zero vector stays zero)."""
        if node not in self._cache:
            emb = np.asarray(self._encode([str(node)]), dtype=np.float32)[0]
            norm = np.linalg.norm(emb)
            self._cache[node] = emb / norm if norm > 0 else emb
        return self._cache[node]

    def prefetch(self, nodes: Sequence[Hashable]) -> None:
        """Encode several nodes in one batch and cache the results."""
        missing = [node for node in nodes if node not in self._cache]
        if not missing:
            return
        embeddings = np.asarray(self._encode([str(n) for n in missing]), dtype=np.float32)
        norms = np.linalg.norm(embeddings, axis=1, keepdims=True)
        norms[norms == 0] = 1.0
        for node, emb in zip(missing, embeddings / norms):
            self._cache[node] = emb

    def similarity(self, node: Hashable) -> float:
        """Cosine similarity between node and goal."""
        return float(np.dot(self._normalized(node), self._normalized(self._goal)))

    def __call__(self, start: Hashable, node: Hashable) -> float:
        if node == self._goal:
            return 0.0
        return self._scale * max(0.0, 1.0 - self.similarity(node))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(goal={self._goal!r}, scale={self._scale})"
