from pathlib import Path
from isoprism import load_scene

def main():
    """
    Loads a scene description from YAML and renders it to PNG.

    The same file can be rendered from the command line:

        isoprism examples/house.yaml -o house.png --watch
    """
    return load_scene(Path(__file__).parent / "house.yaml")

if __name__ == "__main__":
    main().save("house.png")
