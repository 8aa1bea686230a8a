from isoprism import *

def main():
    """
    Demonstrates how groups combine their children in order.

    A negative child only cuts the siblings declared before it. Here the
    window is cut out of the wall, and the frame added afterwards stays.
    """
    wall = prism((0, 0, 0), (1, 6, 4), color="#d0c8b0")
    window = prism((0, 2, 1), (1, 2, 2)).negative()
    frame = prism((0, 2, 1), (1, 2, 1), color="#6a4a2a")

    house = group(
        prism((-4, 0, 0), (4, 6, 4), color="#e8e0c8"),
        wall,
        window,
        frame,
        color="#ffffff",
        name="house",
    )
    return house

if __name__ == "__main__":
    svg, shift_x, shift_y = render_svg(main(), shader=Shader(x="#00000026", y="#00000066"), unit=24)
    print(svg)
