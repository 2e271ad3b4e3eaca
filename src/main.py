# src/main.py
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree

def run(raw_values, verbose: bool = False) -> AVLTree:
    """Insere cada entrada na ordem recebida e imprime o estado final da árvore."""
    tree = AVLTree(verbose=verbose)

    for raw in raw_values:
        outcome = tree.insert(raw)
        rotations = ", ".join(tree.last_rotations) if tree.last_rotations else "-"
        print(f"insert({raw!r}) -> {outcome} | Rotações: {rotations}")

    print(f"\nValores (in-order): {tree.values()}")
    print(f"Altura: {tree.height()} | Nós: {len(tree)}")

    snap = tree.snapshot()
    if snap.is_empty:
        print("Árvore vazia.")
        return tree

    print(f"Raiz: {snap.root_value()}")
    for index, node in enumerate(snap.nodes):
        left, right = snap.children_of(index)
        left_txt = left.value if left else "-"
        right_txt = right.value if right else "-"
        print(f"  [{index:3d}] {'  ' * node.depth}{node.value} (h={node.height}) esq={left_txt} dir={right_txt}")

    return tree

def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = False
    if "-v" in args:
        verbose = True
        args.remove("-v")

    if not args:
        print("Uso: python -m src.main [-v] VALOR [VALOR ...]")
        return 1

    tree = run(args, verbose=verbose)
    return 0 if tree.check_invariants() else 2

if __name__ == "__main__":
    sys.exit(main())
