from dataclasses import dataclass

from slotarena import DoubleFreeError, FreeList, Idx


@dataclass
class Node:
    """Tree node that links to its children by handle instead of reference."""

    label: str
    children: list[Idx["Node"]]


def main() -> None:
    nodes: FreeList[Node] = FreeList(item_type=Node)

    leaf_a = nodes.alloc(Node("a", []))
    leaf_b = nodes.alloc(Node("b", []))
    root = nodes.alloc(Node("root", [leaf_a, leaf_b]))

    for child in nodes[root].children:
        print(f"{nodes[root].label} -> {nodes[child].label} at {child!r}")

    # Detach a child; its slot is the first one handed out again.
    nodes[root].children.remove(leaf_a)
    removed = nodes.dealloc(leaf_a)
    print(f"Removed {removed.label}, free chain: {list(nodes.free_indices())}")

    leaf_c = nodes.alloc(Node("c", []))
    nodes[root].children.append(leaf_c)
    print(f"Allocated c at {leaf_c!r} (reused: {leaf_c == leaf_a})")

    try:
        nodes.dealloc(leaf_b)
        nodes.dealloc(leaf_b)
    except DoubleFreeError as e:
        print(f"Caught: {e}")

    print(nodes)


if __name__ == "__main__":
    main()
