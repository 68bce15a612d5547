import logging
import os

from ordered_tree.src.base.config_loader import get_key_sequences_from_config
from ordered_tree.src.tree import Tree


def describe(tree: Tree) -> str:
    return "\n".join(
        [
            str(tree),
            "",
            f"in order: {' '.join(str(key) for key in tree)}",
            f"nodes: {len(tree)}, height: {tree.height()}",
        ]
    )


def main(output_directory: str = "./tree_output/") -> list[str]:
    os.makedirs(output_directory, exist_ok=True)
    written = []
    for key_sequence in get_key_sequences_from_config():
        tree = Tree.from_keys(key_sequence.keys)
        assert tree.is_valid(), f"{key_sequence.name} broke ordering"
        full_output_file_path = os.path.join(output_directory, key_sequence.name + ".txt")
        with open(full_output_file_path, "w") as f:
            f.write(describe(tree) + "\n")
        logging.info(f"wrote {key_sequence.name} ({len(tree)} nodes) to {full_output_file_path}")
        written.append(full_output_file_path)
    return written


def cli() -> None:
    logging.basicConfig(level=logging.INFO)
    main()


if __name__ == "__main__":
    cli()
