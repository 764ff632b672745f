import logging
import os.path
import sys
from argparse import ArgumentParser
from typing import Optional

from .cli_utils import setup_logging
from .codec import CodecError
from .config import CONFIG_DIR, load_config
from .file_utils import (
    read_participants_json,
    save_encoded_assignments,
    save_unencoded_assignments,
)
from .gift_exchange import assign_people, get_pairings, sanity_check_assignments
from .message_utils import create_messages
from .tokens import TOKEN_STYLES, create_decryption_url, decode_token


DATA_OUTPUT_DIR = os.path.normpath(
    os.path.join(os.path.dirname(__file__), "..", "data")
)


def main(
    people_fname: str,
    config_fname: Optional[str],
    output_dir: str,
    assignment_cycles: Optional[int],
    token_style: Optional[str],
    template_fname: Optional[str],
    random_seed: Optional[int],
    reveal: bool,
) -> None:
    config = load_config(config_fname)
    if assignment_cycles is None:
        assignment_cycles = config["assignment_cycles"]
    if token_style is None:
        token_style = config["token_style"]
    if template_fname is None:
        template_fname = config["message_template"]

    people = read_participants_json(people_fname)
    try:
        assigned = assign_people(
            people,
            assignment_cycles=assignment_cycles,
            random_seed=random_seed,
            token_style=token_style,
        )
    except CodecError as err:
        logging.critical("Cannot encode these names: %s", err)
        sys.exit(1)
    if not assigned or assigned[0].assignment is None:
        logging.error(
            "No valid assignment exists for %d people over %d rounds",
            len(people),
            assignment_cycles,
        )
        sys.exit(1)
    sanity_check_assignments(assigned, assignment_cycles)

    if reveal:
        pairings = get_pairings(assigned)
        print("Pairings:")
        for i, (g, r) in enumerate(pairings.items()):
            print(f"\t{i + 1}. {g} -> {', '.join(r)}")
        save_unencoded_assignments(pairings, output_dir)

    save_encoded_assignments(assigned, output_dir)
    print("Reveal URLs:")
    for i, person in enumerate(assigned):
        assert person.encoded_assignment is not None
        url = create_decryption_url(person.encoded_assignment, config["site_url"])
        print(f"\t{i + 1}. Giver = {person.name}")
        print(f"\tReveal URL = {url}")

    if template_fname:
        assert os.path.exists(template_fname), f"Template {template_fname} does not exist"
        create_messages(assigned, template_fname, output_dir, config["site_url"])
        logging.info("Wrote messages to %s", output_dir)


def reveal_token(token: str) -> None:
    try:
        giver, receivers = decode_token(token)
    except (CodecError, ValueError) as err:
        logging.critical("Could not decode token: %s", err)
        sys.exit(1)
    print(f"{giver} gives to {receivers}")


if __name__ == "__main__":
    parser = ArgumentParser(prog="gift_exchange")
    parser.add_argument(
        "--people-file",
        default=os.path.join(CONFIG_DIR, "names.json"),
        help="JSON file listing participants and their constraints",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON config file. Defaults to config/config.json when it exists",
    )
    parser.add_argument(
        "-r",
        "--rounds",
        type=int,
        default=None,
        help="Number of people each participant gives to",
    )
    parser.add_argument(
        "--style",
        choices=TOKEN_STYLES,
        default=None,
        help="Token format: link (?n=..&a=..) or short (name/..)",
    )
    parser.add_argument(
        "--template",
        default=None,
        help="jinja2 template used to write one message per giver",
    )
    parser.add_argument(
        "--output-dir",
        "-D",
        default=DATA_OUTPUT_DIR,
        help="Directory where to store tokens and messages",
    )
    parser.add_argument(
        "-s",
        "--random-seed",
        type=int,
        default=None,
        help="Random seed to use to generate repeatable assignments",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Print and save the unencoded assignments too",
    )
    parser.add_argument(
        "--decode",
        default=None,
        metavar="TOKEN",
        help="Decode a token or reveal URL instead of assigning",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output for debugging"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )
    args = parser.parse_args()
    setup_logging(args.verbose, quiet=args.quiet)
    if args.decode:
        reveal_token(args.decode)
    else:
        assert os.path.exists(args.people_file), f"file {args.people_file} does not exist"
        logging.debug("Using output directory %s", args.output_dir)
        main(
            people_fname=args.people_file,
            config_fname=args.config,
            output_dir=args.output_dir,
            assignment_cycles=args.rounds,
            token_style=args.style,
            template_fname=args.template,
            random_seed=args.random_seed,
            reveal=args.reveal,
        )
