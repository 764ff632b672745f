import os

from gift_exchange.gift_exchange import Participant, assign_people
from gift_exchange.message_utils import create_messages
from gift_exchange.tokens import decode_token

SITE_URL = "https://example.org/reveal"


def test_create_messages(tmp_path):
    template = os.path.join(tmp_path, "template.jinja2")
    with open(template, "w") as fp:
        fp.write("Hi {{ giver }}, see {{ link }}")
    people = [Participant("Light Yagami"), Participant("Eru Roraito"), Participant("Misa Amane")]
    assigned = assign_people(people, random_seed=42)
    paths = create_messages(assigned, template, str(tmp_path), SITE_URL)
    assert len(paths) == 3
    assert paths[0] == os.path.join(tmp_path, "messages", "Light_Yagami.txt")
    for person, path in zip(assigned, paths):
        with open(path) as fp:
            text = fp.read()
        assert text.startswith(f"Hi {person.name}, see {SITE_URL}?n=")
        link = text.split("see ", 1)[1]
        giver, _ = decode_token(link)
        assert giver == person.name
