import logging
import time
start_time = time.time()

import pyvista as pv

from trishape.config.loader import load_config, default_attributes, resolve_attribute
from trishape.config.user_input import SHAPE_INPUTS
from trishape.data import AttributeKey, Orientation
from trishape.figures import TriangleShape
from trishape.plotting import plot_shapes

logger = logging.getLogger("trishape")


def initialize_shapes(shape_inputs, cfg):
    """Convert User Input into triangle figures"""
    shapes = []
    for shape_input in shape_inputs:
        attrs = default_attributes(cfg)
        for name, raw in shape_input.get('attributes', {}).items():
            key = AttributeKey.from_config_name(name)
            attrs.set(key, resolve_attribute(key, raw))

        shape = TriangleShape(
            shape_input['x'], shape_input['y'], shape_input['width'], shape_input['height'],
            orientation=Orientation[shape_input.get('orientation', 'NORTH')],
            attributes=attrs,
        )
        shapes.append(shape)
    return shapes


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    # Initialization
    cfg = load_config()
    plot_cfg = cfg.get('plot', {})
    plotter = pv.Plotter()

    shapes = initialize_shapes(SHAPE_INPUTS, cfg)

    logger.info("Built %d figures in %.3f seconds", len(shapes), time.time() - start_time)

    plot_shapes(shapes, plotter, plot_cfg)
    plotter.view_xy()
    plotter.show()

if __name__ == '__main__':
    main()
