from array import array


class DisjointSet:
    """
    Tracks which cells are already connected while a maze is being built.

    parent[i] == -1 marks a root (a cell with no group pointer). Lookups
    use path splitting, so chains stay short without a rank table.
    """

    NO_PARENT = -1

    __slots__ = ('parent', 'group_count')

    def __init__(self, size: int):
        # 'i' (signed int) -> 4 bytes per cell
        self.parent = array('i', [self.NO_PARENT] * size)
        self.group_count = size

    def __len__(self):
        return len(self.parent)

    def reset(self):
        for i in range(len(self.parent)):
            self.parent[i] = self.NO_PARENT
        self.group_count = len(self.parent)

    def find(self, i: int) -> int:
        parent = self.parent
        while parent[i] != self.NO_PARENT:
            up = parent[i]
            if parent[up] != self.NO_PARENT:
                # Path splitting: point at the grandparent
                parent[i] = parent[up]
            i = up
        return i

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """
        Joins the groups of a and b. The root of the group holding the larger
        of the two indexes is attached to the root of the other one.
        Returns False if they were already in the same group.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if a < b:
            self.parent[root_b] = root_a
        else:
            self.parent[root_a] = root_b
        self.group_count -= 1
        return True
