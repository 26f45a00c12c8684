"""Search trees and the category hierarchy built on the containers."""

from ._avl import AVLTree
from ._bst import BinarySearchTree
from ._category import CategoryNode, CategoryTree
from ._red_black import RedBlackTree

__all__ = [
    "AVLTree",
    "BinarySearchTree",
    "CategoryNode",
    "CategoryTree",
    "RedBlackTree",
]
