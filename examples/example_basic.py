from isoprism import *

def main():
    """
    Demonstrates the basic concepts of prism modeling.

    This example shows how to:
    - Create boxes with `prism` and `cube`.
    - Combine them with union (`|`) and difference (`-`).
    - Shade the faces with a `Shader`.
    """
    # A 3x3x3 block with a notch cut out of its front top corner
    f = prism((0, 0, 0), 3, color="#3080ff") - prism((2, 0, 2), (1, 3, 1))

    # A small red cube sitting on top
    f = f | cube((0, 0, 3), color="#ff4040")

    return f

if __name__ == "__main__":
    obj = main()
    shader = Shader(x="#00000026", y="#00000066")
    obj.save("example_basic.svg", shader=shader, force_square=True)
