import logging

import matplotlib
from matplotlib import figure
from matplotlib.backends import backend_agg
from matplotlib.ticker import MaxNLocator


class MatplotlibPlot:
    XAXIS_LABEL_PADDING = 5
    YAXIS_LABEL_PADDING = 5
    TITLE_PADDING = 10

    def __init__(self):
        self.legend = None
        self.create_canvas_and_axes()

    def create_canvas_and_axes(self):
        fig = figure.Figure()
        self.canvas = backend_agg.FigureCanvasAgg(fig)
        self.axes = fig.add_subplot(111)

    @staticmethod
    def set_rc_params(matplotlib_options):
        # Reset options from rc file.
        matplotlib.rc_file_defaults()
        if matplotlib_options:
            matplotlib.rcParams.update(matplotlib_options)

    def create_legend(self):
        self.legend = self.axes.legend(
            scatterpoints=1, loc="center", bbox_to_anchor=(1.3, 0.5)
        )

    def print_figure(self, filename):
        extra_artists = []
        if self.legend:
            extra_artists.append(self.legend.legendPatch)
        kwargs = {"bbox_extra_artists": extra_artists}
        # Note: Setting bbox_inches keyword breaks pgf export.
        if not str(filename).endswith("pgf"):
            kwargs["bbox_inches"] = "tight"
        self.canvas.print_figure(filename, **kwargs)
        logging.info(f"Wrote file://{filename}")


def get_categories(indexes, xmetric, ymetric):
    """
    Map category names to lists of (x, y) coordinates, one per plan.

    Plans with the best value for *ymetric* form their own category.
    """
    metrics = {metric.name: metric for metric in indexes.metrics}
    for name in [xmetric, ymetric]:
        if name not in metrics:
            raise ValueError(f"Unknown metric: {name}")
    if metrics[ymetric].min_wins:
        best = indexes.get_min(ymetric)
    else:
        best = indexes.get_max(ymetric)
    best_category = f"best {ymetric}"
    categories = {"plans": [], best_category: []}
    for x, y in zip(indexes.values[xmetric], indexes.values[ymetric]):
        category = best_category if y == best else "plans"
        categories[category].append((x, y))
    return {name: coords for name, coords in categories.items() if coords}


def write_scatter_plot(
    indexes,
    filename,
    xmetric="steps",
    ymetric="time",
    title=None,
    matplotlib_options=None,
):
    """Plot one point per plan with *xmetric* against *ymetric*."""
    categories = get_categories(indexes, xmetric, ymetric)
    MatplotlibPlot.set_rc_params(matplotlib_options)
    plot = MatplotlibPlot()
    if title:
        plot.axes.set_title(title, pad=MatplotlibPlot.TITLE_PADDING)
    plot.axes.set_xlabel(xmetric, labelpad=MatplotlibPlot.XAXIS_LABEL_PADDING)
    plot.axes.set_ylabel(ymetric, labelpad=MatplotlibPlot.YAXIS_LABEL_PADDING)
    plot.axes.grid(True, linestyle="-", color="0.75")

    for category, coords in sorted(categories.items()):
        x_vals, y_vals = zip(*coords)
        plot.axes.scatter(x_vals, y_vals, clip_on=False, label=category)

    if all(isinstance(x, int) for x in indexes.values[xmetric]):
        plot.axes.xaxis.set_major_locator(MaxNLocator(integer=True))
    if len(categories) > 1:
        plot.create_legend()
    plot.print_figure(filename)
