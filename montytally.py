import numpy as np
import copy

N_DOORS = 3

# Outcome tags each host strategy can produce, in tally order
OUTCOMES = {
    'goat': ('stay', 'switch'),
    'random': ('lose', 'stay', 'switch'),
    'none': ('stay', 'switch'),
}


def check_host(host):
    if host not in OUTCOMES:
        raise ValueError(f"Host strategy not supported {host}")


def new_tally(host='goat'):
    """Every outcome tag the host strategy allows, all at zero"""
    check_host(host)
    return dict.fromkeys(OUTCOMES[host], 0)


class Trial:
    def __init__(self, rng=None, host='goat', verbose=0):
        """Configure a single three-door trial
        rng: our random number generator, the numpy default is quite good (PCG64)
        host (str): the host's strategy for opening a door
            'goat' -- opens a door that is neither the contestant's nor the prize
            'random' -- opens any door except the contestant's, may reveal the prize
            'none' -- never opens a door
        verbose: set to 1 for the per-trial trace
        """
        check_host(host)
        self.rng = rng or np.random.default_rng()
        self.host = host
        self.verbose = verbose

        self.winning_door = None  # Door hiding the prize
        self.choice = None        # Contestant's door
        self.host_opens = None    # Door revealed by the host, if any
        self.outcome = None

    def draw_door(self):
        return int(self.rng.integers(N_DOORS))

    def reveal(self):
        """Host opens a random allowable door. The contestant's door is never
        allowed, and under 'goat' neither is the winning door, so at least one
        option always remains.
        """
        if self.host == 'none':
            return None

        options = [idx for idx in range(N_DOORS) if idx != self.choice]
        if self.host == 'goat' and self.winning_door in options:
            options.remove(self.winning_door)
        return options[self.rng.integers(len(options))]

    def score(self):
        # A revealed prize ends the game before any stay/switch decision
        if self.host_opens is not None and self.host_opens == self.winning_door:
            return 'lose'
        if self.choice == self.winning_door:
            return 'stay'
        return 'switch'

    def play(self):
        """A standard trial is:
            1) prize placed behind a random door
            2) contestant chooses a door randomly
            3) host reveals a door according to the host strategy
        Returns the outcome tag: which move would have won.
        """
        self.winning_door = self.draw_door()
        self.choice = self.draw_door()
        self.host_opens = self.reveal()

        if self.verbose:
            print(f"Contestant chooses door {self.choice}")
            if self.host_opens is not None:
                print(f"Monty opens door {self.host_opens}")
            print(f"Winning door is {self.winning_door}")

        self.outcome = self.score()
        return self.outcome


class TrialSeries:
    def __init__(self, config):
        self.config = copy.deepcopy(config)
        self.host = self.config['strategies']['host']
        check_host(self.host)
        self.rng = np.random.default_rng(self.config.get('seed'))
        self.verbose = self.config.get('verbose', 0)

        # Data collection, trials are only kept on request
        self.keep_history = self.config.get('keep_history', False)
        self.history = []
        self.tally = new_tally(self.host)

    def header(self):
        if self.verbose > 1:
            print(f"\n--- Simulating {self.config['trials']} trials "
                  f"with host strategy: {self.host} ---")

    def pstats(self):
        print(self.tally)
        total = sum(self.tally.values())
        if self.verbose > 1 and total:
            for outcome, count in self.tally.items():
                print(f"{outcome}: {count} / {total} for {100 * count / total:.1f}%")

    def simulate(self, n=None):
        """Run n trials (config 'trials' by default) and return the tally"""
        if n is None:
            n = self.config['trials']
        for _ in range(n):
            trial = Trial(rng=self.rng, host=self.host, verbose=self.verbose)
            outcome = trial.play()
            if self.verbose:
                print(f"Contestant should {outcome}")
            if self.keep_history:
                self.history.append(trial)
            self.tally[outcome] += 1
        return self.tally
