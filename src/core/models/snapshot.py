from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

@dataclass(frozen=True)
class SnapshotNode:
    """
    Registro de um nó na fotografia da árvore.
    'left' e 'right' são índices dentro de TreeSnapshot.nodes (ou None).
    """
    value: Any
    height: int
    depth: int
    left: Optional[int] = None
    right: Optional[int] = None

@dataclass(frozen=True)
class TreeSnapshot:
    """
    Cópia imutável e desacoplada da forma da Árvore AVL.
    Os nós estão em ordem in-order: o índice é a coluna horizontal do nó
    e 'depth' é a sua linha. Alterações posteriores na árvore não afetam
    uma fotografia já tirada.
    """
    nodes: Tuple[SnapshotNode, ...] = ()
    root: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self):
        return len(self.nodes)

    def root_value(self) -> Optional[Any]:
        if self.root is None:
            return None
        return self.nodes[self.root].value

    def values(self) -> List[Any]:
        """Valores em ordem crescente."""
        return [n.value for n in self.nodes]

    def children_of(self, index: int) -> Tuple[Optional[SnapshotNode], Optional[SnapshotNode]]:
        """Retorna (filho esquerdo, filho direito) do registro no índice dado."""
        node = self.nodes[index]
        left = self.nodes[node.left] if node.left is not None else None
        right = self.nodes[node.right] if node.right is not None else None
        return left, right

    def to_dict(self) -> Optional[Dict[str, Any]]:
        """
        Converte para dicionários aninhados {value, height, left, right},
        o formato de árvore de objetos simples esperado por renderizadores.
        """
        return self._to_dict(self.root)

    def _to_dict(self, index: Optional[int]) -> Optional[Dict[str, Any]]:
        if index is None:
            return None
        node = self.nodes[index]
        return {
            'value': node.value,
            'height': node.height,
            'left': self._to_dict(node.left),
            'right': self._to_dict(node.right)
        }
