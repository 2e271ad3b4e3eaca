from typing import List, Optional, Any

from src.core.io.value_parser import parse_value
from src.core.models.snapshot import TreeSnapshot, SnapshotNode

class InsertOutcome:
    """
    Resultado de uma chamada a AVLTree.insert().
    O chamador pode ignorar o retorno: rejeições nunca alteram a árvore.
    """
    INSERTED = "INSERIDO"
    REJECTED_DUPLICATE = "REJEITADO_DUPLICADO"
    REJECTED_INVALID = "REJEITADO_INVALIDO"

class RotationCase:
    LEFT_LEFT = "LL"     # Rotação simples à direita
    RIGHT_RIGHT = "RR"   # Rotação simples à esquerda
    LEFT_RIGHT = "LR"    # Esquerda no filho, depois direita
    RIGHT_LEFT = "RL"    # Direita no filho, depois esquerda

class AVLNode:
    """
    Nó interno da Árvore AVL.
    O valor numérico é ao mesmo tempo a chave e o único dado armazenado.
    """
    def __init__(self, value):
        self.value = value
        self.left: Optional['AVLNode'] = None
        self.right: Optional['AVLNode'] = None
        self.height = 1         # Folha tem altura 1

    def __repr__(self):
        return f"AVLNode(value={self.value}, height={self.height})"

class AVLTree:
    """
    Árvore AVL de valores numéricos únicos.
    Inserção em O(log n) com rebalanceamento automático por rotações.

    Entradas inválidas (vazias, não numéricas, NaN/inf) e valores duplicados
    são descartados silenciosamente; insert() devolve um InsertOutcome que
    o chamador pode consultar ou ignorar.
    """
    MAX_LOGS = 50

    def __init__(self, verbose: bool = False):
        self.root: Optional[AVLNode] = None
        self.size = 0
        self.verbose = verbose
        self.logs: List[str] = []
        self.last_rotations: List[str] = []
        self._created = False

    # --- Operações Públicas ---

    def insert(self, raw_value: Any) -> str:
        """Converte a entrada, insere o valor e rebalanceia a árvore."""
        self.last_rotations = []

        value = parse_value(raw_value)
        if value is None:
            self.log(f"[AVL REJEITADO] Entrada inválida: {raw_value!r}")
            return InsertOutcome.REJECTED_INVALID

        self._created = False
        self.root = self._insert_recursive(self.root, value)

        if not self._created:
            self.log(f"[AVL REJEITADO] Valor duplicado: {value}")
            return InsertOutcome.REJECTED_DUPLICATE

        self.size += 1
        return InsertOutcome.INSERTED

    def height(self) -> int:
        """Altura da árvore (0 quando vazia)."""
        return self._get_height(self.root)

    def to_object(self) -> Optional[AVLNode]:
        """
        Retorna a raiz viva da árvore.
        Quem consome esta referência não deve escrever através dela;
        prefira snapshot(), que é uma cópia desacoplada.
        """
        return self.root

    def snapshot(self) -> TreeSnapshot:
        """
        Cópia somente-leitura da forma atual da árvore.
        Os registros ficam na ordem in-order, então o índice de cada
        registro é a sua coluna num layout horizontal.
        """
        records: List[SnapshotNode] = []
        root_index = self._snapshot_recursive(self.root, 0, records)
        return TreeSnapshot(nodes=tuple(records), root=root_index)

    def clear(self):
        """Descarta todos os nós. Chamar em árvore vazia não tem efeito."""
        if self.root is not None:
            self.log(f"[AVL] Árvore limpa ({self.size} nós descartados).")
        self.root = None
        self.size = 0
        self.last_rotations = []

    def is_empty(self) -> bool:
        return self.root is None

    def values(self) -> List[Any]:
        """Retorna todos os valores em ordem crescente (in-order traversal)."""
        values = []
        self._in_order(self.root, values)
        return values

    def check_invariants(self) -> bool:
        """
        Verifica ordem BST, unicidade, altura registrada e fator de
        balanceamento de todos os nós.
        """
        ok, _ = self._check_recursive(self.root, None, None)
        return ok

    def log(self, msg: str):
        if self.verbose:
            print(msg)
        self.logs.append(msg)
        # Mantém apenas as últimas mensagens na memória
        if len(self.logs) > self.MAX_LOGS:
            self.logs.pop(0)

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"AVLTree(size={self.size}, height={self.height()})"

    # --- Inserção Recursiva ---

    def _insert_recursive(self, node: Optional[AVLNode], value) -> AVLNode:
        # 1. Inserção normal de BST
        if not node:
            self._created = True
            return AVLNode(value)

        if value < node.value:
            node.left = self._insert_recursive(node.left, value)
        elif value > node.value:
            node.right = self._insert_recursive(node.right, value)
        else:
            # Duplicado: só pode estar no caminho da descida
            return node

        # 2. Atualizar altura do nó ancestral
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

        # 3. Fator de balanceamento
        balance = self._get_balance(node)

        # 4. Rotações (o valor inserido indica qual subárvore cresceu)

        # Caso 1 - Rotação à Direita (Left-Left)
        if balance > 1 and value < node.left.value:
            self._record_rotation(RotationCase.LEFT_LEFT, node)
            return self._rotate_right(node)

        # Caso 2 - Rotação à Esquerda (Right-Right)
        if balance < -1 and value > node.right.value:
            self._record_rotation(RotationCase.RIGHT_RIGHT, node)
            return self._rotate_left(node)

        # Caso 3 - Rotação Dupla à Direita (Left-Right)
        if balance > 1 and value > node.left.value:
            self._record_rotation(RotationCase.LEFT_RIGHT, node)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left)
        if balance < -1 and value < node.right.value:
            self._record_rotation(RotationCase.RIGHT_LEFT, node)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def _record_rotation(self, case: str, node: AVLNode):
        self.last_rotations.append(case)
        self.log(f"[AVL ROTACAO] Caso {case} no nó {node.value}")

    # --- Métodos Auxiliares e Rotações ---

    def _get_height(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _get_balance(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _update_height(self, node: AVLNode):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _rotate_left(self, x: AVLNode) -> AVLNode:
        """
        Rotação simples à esquerda.
        O filho direito 'y' sobe; a subárvore esquerda de 'y' passa a ser
        a direita de 'x'.
        """
        y = x.right
        if y is None:
            raise ValueError(f"Rotação à esquerda exige filho direito (nó {x.value}).")
        T2 = y.left

        # Rotação
        y.left = x
        x.right = T2

        # Filho antes do pai
        self._update_height(x)
        self._update_height(y)

        return y

    def _rotate_right(self, y: AVLNode) -> AVLNode:
        """
        Rotação simples à direita.
        O filho esquerdo 'x' sobe; a subárvore direita de 'x' passa a ser
        a esquerda de 'y'.
        """
        x = y.left
        if x is None:
            raise ValueError(f"Rotação à direita exige filho esquerdo (nó {y.value}).")
        T2 = x.right

        # Rotação
        x.right = y
        y.left = T2

        # Filho antes do pai
        self._update_height(y)
        self._update_height(x)

        return x

    # --- Travessias ---

    def _in_order(self, node: Optional[AVLNode], values: List[Any]):
        if node:
            self._in_order(node.left, values)
            values.append(node.value)
            self._in_order(node.right, values)

    def _snapshot_recursive(self, node: Optional[AVLNode], depth: int, records: List[SnapshotNode]) -> Optional[int]:
        if not node:
            return None

        left_index = self._snapshot_recursive(node.left, depth + 1, records)

        # Reserva a posição in-order antes de visitar a direita
        index = len(records)
        records.append(None)

        right_index = self._snapshot_recursive(node.right, depth + 1, records)

        records[index] = SnapshotNode(
            value=node.value,
            height=node.height,
            depth=depth,
            left=left_index,
            right=right_index
        )
        return index

    def _check_recursive(self, node: Optional[AVLNode], low, high):
        """Retorna (válido, altura real) da subárvore."""
        if not node:
            return True, 0

        if low is not None and not node.value > low:
            return False, 0
        if high is not None and not node.value < high:
            return False, 0

        left_ok, left_height = self._check_recursive(node.left, low, node.value)
        right_ok, right_height = self._check_recursive(node.right, node.value, high)
        if not (left_ok and right_ok):
            return False, 0

        real_height = 1 + max(left_height, right_height)
        if node.height != real_height:
            return False, real_height
        if abs(left_height - right_height) > 1:
            return False, real_height

        return True, real_height
