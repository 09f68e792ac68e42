import argparse
import logging
import sys
from .enumerator import SubdomainEnumerator
from .config import logger, load_settings, DEFAULT_OUTPUT
from .utils.input_utils import load_domains


def build_parser(settings):
    parser = argparse.ArgumentParser(prog="subharvest",
                                     description="Passive subdomain harvester: queries public sources for every target domain "
                                                 "and writes a sorted, unique list.",
                                     formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("-d", "--domain", help="Target domain (e.g., example.com)")
    parser.add_argument("-f", "--file", help="File with target domains, one per line. Takes precedence over -d.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help=f"Output file for the sorted subdomain list (default: {DEFAULT_OUTPUT}).")
    parser.add_argument("-t", "--threads", type=int, default=settings['threads'],
                        help=f"Maximum number of domains processed concurrently (default: {settings['threads']}).")
    parser.add_argument("--timeout", type=float, default=settings['timeout'],
                        help=f"Per-request timeout in seconds (default: {settings['timeout']:g}).")
    parser.add_argument("-p", "--proxies", default=settings['proxies'],
                        help="Path to a file containing proxies (e.g., http://user:pass@ip:port), one per line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (display debug messages).")
    return parser


def main(argv=None):
    parser = build_parser(load_settings())
    args = parser.parse_args(argv)

    if not args.file and not (args.domain or '').strip():
        parser.error("one of -d/--domain or -f/--file is required (the domain must not be blank)")
    if args.threads < 1:
        parser.error("--threads must be at least 1")

    if args.verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if args.file:
        try:
            domains = load_domains(args.file)
        except OSError as e:
            logger.error(f"Error reading domain file {args.file}: {e}")
            return 1
    else:
        domains = [args.domain.strip()]

    try:
        enumerator = SubdomainEnumerator(
            domains=domains,
            threads=args.threads,
            timeout=args.timeout,
            verbose=args.verbose,
            output_file=args.output,
            proxy_list_path=args.proxies,
        )
        enumerator.run()
    except OSError as e:
        logger.critical(f"An I/O error aborted the run: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
