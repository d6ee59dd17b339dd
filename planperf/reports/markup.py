import datetime
import logging

import txt2tags


CSS = """\
<style type="text/css">
    table { border-collapse: collapse; }
    td { font-family: monospace; vertical-align: top; }
</style>
"""


def escape(text):
    return f'""{text}""'


def _get_config(target):
    """Return txt2tags options that turn "\\\\" into line breaks for *target*."""
    line_breaks = {
        "html": [r"\\\\", r"<br />"],
        "tex": [r"\$\\backslash\$\$\\backslash\$", r"\\\\"],
        "txt": [r"\\\\", "\n"],
    }
    config = {"preproc": [], "postproc": []}
    if target == "html":
        config["toc"] = 0
        config["postproc"].append([r"</head>", CSS + "</head>"])
    if target in line_breaks:
        config["postproc"].append(line_breaks[target])
    return config


class Document:
    """A titled txt2tags document that renders to any txt2tags target."""

    def __init__(self, title="", date=""):
        self.title = title
        self.date = date or datetime.date.today().isoformat()
        self.lines = []

    def add_text(self, text):
        self.lines.extend(text.split("\n"))

    def __str__(self):
        return "\n".join(self.lines)

    def render(self, target):
        config = _get_config(target)
        config.update(
            infile=txt2tags.MODULEIN, outfile=txt2tags.MODULEOUT, target=target
        )
        headers = [self.title, "", self.date]
        try:
            return "\n".join(txt2tags.convert_file(headers, self.lines, config))
        except txt2tags.error as err:
            logging.error(f"Could not render {target} document: {err}")
            return str(err)
