"""
Render a message for each giver containing their token and reveal link.
Sending the messages is left to whoever runs this.
"""

import logging
import os
from typing import List

import jinja2

from .gift_exchange import Participant
from .tokens import create_decryption_url


def create_messages(
    people: List[Participant], template_file: str, output_dir: str, site_url: str
) -> List[str]:
    """
    Write `<output_dir>/messages/<giver>.txt` for each giver.
    The template is given `giver`, `token` and `link`.
    :returns: The paths written
    """
    d = os.path.join(output_dir, "messages")
    if not os.path.exists(d):
        os.makedirs(d)
    with open(template_file) as fp:
        template = jinja2.Template(fp.read())
    logging.debug("Creating messages from template %s...", template_file)
    paths = []
    for person in people:
        assert person.encoded_assignment is not None, f"{person.name} has no token"
        logging.debug("Creating message for %s...", person.name)
        s = template.render(
            {
                "giver": person.name,
                "token": person.encoded_assignment,
                "link": create_decryption_url(person.encoded_assignment, site_url),
            }
        )
        out_fname = os.path.join(d, person.name.replace(" ", "_") + ".txt")
        with open(out_fname, "w") as fp:
            fp.write(s)
        paths.append(out_fname)
    return paths
