#!/usr/bin/env python3
"""
Interactive Supervised Learning - Main Entry Point

Fits one model to a set of points and queries it, the same way the
interactive demos do on every click.

Usage:
    python main.py regress --points "800,150;1500,300;2500,520" --degree 1 --predict 2000
    python main.py regress --csv houses.csv --degree 2 --plot fit.png
    python main.py classify --algorithm knn --points "0.2,4,unripe;0.8,7,ripe" --predict 0.6 6
    python main.py classify --algorithm tree --csv tomatoes.csv --plot regions.png
"""

import argparse
import csv
import math
import os
import sys
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import MAX_POLYNOMIAL_DEGREE, PRESETS, get_default_config
from evaluation import classification_report, print_confusion_matrix, regression_report
from ml_from_scratch import (DecisionTreeClassifier, KNeighborsClassifier, Label,
                             LogisticClassifier, PolynomialFitter, Sample, export_text)

ALGORITHMS = ('logistic', 'knn', 'tree')


def parse_sample(fields: List[str], labeled: bool) -> Sample:
    """Build a Sample from 'x', 'y' and (for classification) 'label' fields."""
    fields = [f.strip() for f in fields]
    expected = 3 if labeled else 2
    if len(fields) != expected:
        raise ValueError(f"Expected {expected} values per point, got {len(fields)}: {fields}")

    x, y = float(fields[0]), float(fields[1])
    label = Label.parse(fields[2]) if labeled else None
    return Sample(x, y, label)


def parse_points(text: str, labeled: bool) -> List[Sample]:
    """Parse 'x,y[,label];x,y[,label];...' into samples."""
    return [parse_sample(chunk.split(','), labeled)
            for chunk in text.split(';') if chunk.strip()]


def load_csv(path: str, labeled: bool) -> List[Sample]:
    """
    Load samples from a CSV file with columns x, y[, label].

    A first row whose x column is not numeric is treated as a header.
    """
    samples = []
    with open(path, newline='') as f:
        for row_num, row in enumerate(csv.reader(f)):
            if not row or not any(cell.strip() for cell in row):
                continue
            if row_num == 0:
                try:
                    float(row[0])
                except ValueError:
                    continue
            samples.append(parse_sample(row, labeled))
    return samples


def read_samples(args, parser: argparse.ArgumentParser, labeled: bool) -> List[Sample]:
    try:
        if args.csv:
            return load_csv(args.csv, labeled)
        return parse_points(args.points or '', labeled)
    except (OSError, ValueError) as e:
        parser.error(str(e))


def run_regression(args, parser: argparse.ArgumentParser) -> int:
    """Fit a polynomial and report it."""
    samples = read_samples(args, parser, labeled=False)
    preset = PRESETS[args.preset or 'housing']

    model = PolynomialFitter(args.degree).fit(samples)

    print(f"Samples: {len(samples)}")
    if not model.is_fitted:
        print(f"Not enough points for degree {args.degree} "
              f"(need at least {args.degree + 1})")
    else:
        report = regression_report(model.predict, samples)
        print(f"Equation: y = {model.format_equation()}")
        print(f"R2: {report.r2:.4f}  RMSE: {report.rmse:.4f}")

    if args.predict is not None:
        value = model.evaluate(args.predict)
        if math.isnan(value):
            print(f"Prediction at x={args.predict:g}: undefined")
        else:
            print(f"Prediction at x={args.predict:g}: {value:.2f}")

    if args.plot:
        from visualization import plot_polynomial_fit
        plot_polynomial_fit(model, samples, preset.x_range, preset.y_range,
                            x_label=preset.x_label, y_label=preset.y_label,
                            query=args.predict, save_path=args.plot,
                            dpi=get_default_config()['plot'].dpi)
    return 0


def build_classifier(algorithm: str, preset=None):
    """Create the classifier named by algorithm from the default configuration."""
    cfg = get_default_config()['classification']
    preset = preset or cfg.preset
    if algorithm == 'logistic':
        return LogisticClassifier(cfg.logistic.learning_rate, cfg.logistic.n_iterations)
    if algorithm == 'knn':
        return KNeighborsClassifier(cfg.knn.n_neighbors, preset.x_range, preset.y_range)
    if algorithm == 'tree':
        return DecisionTreeClassifier(cfg.tree.max_depth)
    raise ValueError(f"Unknown algorithm: {algorithm}")


def run_classification(args, parser: argparse.ArgumentParser) -> int:
    """Fit a classifier and report it."""
    samples = read_samples(args, parser, labeled=True)
    preset = PRESETS[args.preset or 'tomato']

    classifier = build_classifier(args.algorithm, preset)
    model = classifier.fit(samples)

    def predict(x, y):
        return classifier.predict(model, x, y)

    print(f"Algorithm: {args.algorithm}")
    print(f"Samples: {len(samples)}")
    if args.algorithm == 'logistic' and model is not None:
        print(f"Model: {model.format_equation()}")
    elif args.algorithm == 'tree':
        print("Tree:")
        print(export_text(model))

    if samples:
        report = classification_report(predict, samples)
        print()
        print(print_confusion_matrix(report.confusion, title="Training Confusion Matrix"))

    if args.predict is not None:
        x, y = args.predict
        pred = predict(x, y)
        print(f"Prediction at ({x:g}, {y:g}): {pred.label.value} "
              f"({round(pred.probability * 100)}% positive)")

    if args.plot:
        from visualization import plot_decision_boundary
        plot_cfg = get_default_config()['plot']
        plot_decision_boundary(predict, samples, preset.x_range, preset.y_range,
                               title=f"{args.algorithm} decision regions",
                               x_label=preset.x_label, y_label=preset.y_label,
                               resolution=plot_cfg.resolution,
                               query=tuple(args.predict) if args.predict else None,
                               save_path=args.plot, dpi=plot_cfg.dpi)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactive Supervised Learning - fit and query small models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py regress --points "800,150;1500,300;2500,520" --predict 2000
    python main.py regress --csv houses.csv --degree 2 --plot fit.png
    python main.py classify --algorithm logistic --csv tomatoes.csv --predict 0.6 6
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    def add_common(sub):
        source = sub.add_mutually_exclusive_group()
        source.add_argument('--points', type=str,
                            help='Inline points separated by ";"')
        source.add_argument('--csv', type=str,
                            help='CSV file with one point per row')
        sub.add_argument('--preset', choices=sorted(PRESETS),
                         help='Fixed feature domains to use')
        sub.add_argument('--plot', type=str, metavar='PATH',
                         help='Save a plot to PATH')

    regress = subparsers.add_parser('regress', help='Polynomial least-squares fit')
    add_common(regress)
    regress.add_argument('--degree', type=int, choices=range(MAX_POLYNOMIAL_DEGREE + 1),
                         default=get_default_config()['regression'].degree,
                         help='Polynomial degree')
    regress.add_argument('--predict', type=float, metavar='X',
                         help='Evaluate the fitted polynomial at X')

    classify = subparsers.add_parser('classify', help='Binary classification')
    add_common(classify)
    classify.add_argument('--algorithm', choices=ALGORITHMS, default='logistic',
                          help='Classifier to train')
    classify.add_argument('--predict', type=float, nargs=2, metavar=('X', 'Y'),
                          help='Classify the point (X, Y)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'regress':
        return run_regression(args, parser)
    return run_classification(args, parser)


if __name__ == "__main__":
    sys.exit(main())
