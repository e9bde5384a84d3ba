import sys
import argparse
from splitter.logger import setup_logger
from splitter.session import SplitterSession
from splitter.export import render_to_file
from splitter.constants import PERCENTAGE_HINT
from loguru import logger


# Функция-перехватчик
def exception_hook(exc_type, exc_value, exc_traceback):
    logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("Uncaught exception!")
    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Balance 100% across three factors and render the split."
    )
    parser.add_argument("weights", nargs=3, type=float, metavar="W",
                        help="Raw weights A B C (projected onto the simplex)")
    parser.add_argument("-o", "--output", default="split.png", help="Output image file")
    parser.add_argument("--names", nargs=3, metavar="NAME", help="Factor names")
    parser.add_argument("--dpi", type=int, default=150)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    session = SplitterSession()
    if args.names:
        for i, name in enumerate(args.names):
            session.rename_factor(i, name)
    session.set_split(*args.weights)

    render_to_file(session.state, args.output, dpi=args.dpi)
    for name, label in zip(session.names, session.percent_labels()):
        print(f"{name}: {label}")
    print(PERCENTAGE_HINT)
    return 0


if __name__ == "__main__":
    setup_logger()

    # Подключаем перехватчик
    sys.excepthook = exception_hook

    with logger.catch(reraise=True):
        sys.exit(main())
