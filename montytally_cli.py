import copy
import re
import sys

from montytally import TrialSeries

config = {
    'trials': 1,
    'strategies': {
        # The host's strategy can be the following:
        #   'goat' -- reveals a goat that isn't the contestant's choice
        #   'random' -- opens a random door that isn't the contestant's choice
        #   'none' -- opens nothing, the contestant just learns the winning door
        'host': 'goat',
    },
    # Set to an int for repeatable runs
    'seed': None,
    # 0 prints only the final tally, 1 adds the per-trial trace, 2 adds stats
    'verbose': 1,
    # Keep every played Trial on the series (memory grows with the count)
    'keep_history': False,
}

# Counts beyond this are clamped
MAX_COUNT = sys.maxsize

LEADING_INT = re.compile(r"\s*([+-]?[0-9]+(?:_[0-9]+)*)", re.ASCII)


def parse_count(text):
    """Best-effort integer parse: leading ASCII digits win, anything else counts as 0
    e.g. '12' -> 12, '12 trials' -> 12, 'abc' -> 0
    Counts past MAX_COUNT, however many digits, are clamped to +/- MAX_COUNT.
    """
    match = LEADING_INT.match(text)
    if match is None:
        return 0
    digits = match.group(1).replace('_', '')
    try:
        count = int(digits)
    except ValueError:
        # Too many digits for int() to convert
        count = -MAX_COUNT if digits.startswith('-') else MAX_COUNT
    return max(-MAX_COUNT, min(count, MAX_COUNT))


def main(argv=None, base_config=config):
    """Run the series: `monty-hall [COUNT]`, one trial when COUNT is missing"""
    argv = sys.argv[1:] if argv is None else argv
    curr_config = copy.deepcopy(base_config)
    if argv:
        curr_config['trials'] = parse_count(argv[0])

    simulator = TrialSeries(curr_config)
    simulator.header()
    simulator.simulate()
    simulator.pstats()
    return 0


def with_host(host):
    host_config = copy.deepcopy(config)
    host_config['strategies']['host'] = host
    return host_config


def main_opens_door(argv=None):
    return main(argv, with_host('random'))


def main_no_reveal(argv=None):
    return main(argv, with_host('none'))
