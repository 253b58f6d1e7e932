"""
Runway Contention Simulation - Test Scenarios Configuration

This file contains traffic scenarios used to compare how an airport copes
with increasing demand for its runways.

Each scenario represents a different traffic level or runway configuration.
Time units are minutes.
"""

import argparse

import numpy as np

from parameters import SimulationParameters
from runway_simulation import SimulationEngine

# ==============================================================================
# SCENARIO 1: LOW TRAFFIC - Spare runway capacity
# ==============================================================================
SCENARIO_1_LOW_TRAFFIC = {
    "name": "Low Traffic",
    "description": "Off-peak operations: few arrivals per hour on two runways, runways are almost always free when requested",

    "HORIZON": 24 * 60,

    "RUNWAY_COUNT": 2,
    "SLOT_DURATION": 2,
    "ARRIVAL_FREQUENCY": 4.0,      # Arrivals per hour

    "GROUND_DURATION_MEAN": 45.0,
    "GROUND_DURATION_STDDEV": 10.0,
    "GROUND_DURATION_MIN": 20.0,

    "RETRY_DELAY_MEAN": 5.0,
    "RETRY_DELAY_STDDEV": 2.0,
}


# ==============================================================================
# SCENARIO 2: MEDIUM TRAFFIC - Baseline
# ==============================================================================
SCENARIO_2_MEDIUM_TRAFFIC = {
    "name": "Medium Traffic",
    "description": "Normal operations baseline: steady arrivals with occasional runway conflicts",

    "HORIZON": 24 * 60,

    "RUNWAY_COUNT": 2,
    "SLOT_DURATION": 3,
    "ARRIVAL_FREQUENCY": 8.0,

    "GROUND_DURATION_MEAN": 45.0,
    "GROUND_DURATION_STDDEV": 10.0,
    "GROUND_DURATION_MIN": 20.0,

    "RETRY_DELAY_MEAN": 5.0,
    "RETRY_DELAY_STDDEV": 2.0,
}


# ==============================================================================
# SCENARIO 3: HIGH TRAFFIC - Single runway closed
# ==============================================================================
SCENARIO_3_HIGH_TRAFFIC = {
    "name": "High Traffic",
    "description": "Peak operations with one runway closed for maintenance: landings and takeoffs queue for the remaining runway",

    "HORIZON": 24 * 60,

    "RUNWAY_COUNT": 1,
    "SLOT_DURATION": 2,
    "ARRIVAL_FREQUENCY": 10.0,

    "GROUND_DURATION_MEAN": 45.0,
    "GROUND_DURATION_STDDEV": 10.0,
    "GROUND_DURATION_MIN": 20.0,

    "RETRY_DELAY_MEAN": 5.0,
    "RETRY_DELAY_STDDEV": 2.0,
}


# ==============================================================================
# SCENARIO 4: EXTREME TRAFFIC - Saturated runway
# ==============================================================================
SCENARIO_4_EXTREME_TRAFFIC = {
    "name": "Extreme Traffic",
    "description": "Demand close to runway capacity: landings and takeoffs keep the single runway busy over 90% of the time",

    "HORIZON": 24 * 60,

    "RUNWAY_COUNT": 1,
    "SLOT_DURATION": 2,
    "ARRIVAL_FREQUENCY": 14.0,

    "GROUND_DURATION_MEAN": 45.0,
    "GROUND_DURATION_STDDEV": 10.0,
    "GROUND_DURATION_MIN": 20.0,

    "RETRY_DELAY_MEAN": 5.0,
    "RETRY_DELAY_STDDEV": 2.0,
}


def get_all_scenarios():
    """Returns a list of all scenario configurations."""
    return [
        SCENARIO_1_LOW_TRAFFIC,
        SCENARIO_2_MEDIUM_TRAFFIC,
        SCENARIO_3_HIGH_TRAFFIC,
        SCENARIO_4_EXTREME_TRAFFIC,
    ]


def scenario_parameters(scenario_config, seed=1):
    """Build validated simulation parameters from a scenario dictionary."""
    return SimulationParameters(
        seed=seed,
        runway_count=scenario_config['RUNWAY_COUNT'],
        slot_duration=scenario_config['SLOT_DURATION'],
        arrival_frequency=scenario_config['ARRIVAL_FREQUENCY'],
        ground_duration_mean=scenario_config['GROUND_DURATION_MEAN'],
        ground_duration_stddev=scenario_config['GROUND_DURATION_STDDEV'],
        ground_duration_min=scenario_config['GROUND_DURATION_MIN'],
        retry_delay_mean=scenario_config['RETRY_DELAY_MEAN'],
        retry_delay_stddev=scenario_config['RETRY_DELAY_STDDEV'],
    )


def print_scenario_summary():
    """Prints a summary comparison of all scenarios."""
    scenarios = get_all_scenarios()

    print("\n" + "="*100)
    print("RUNWAY SIMULATION SCENARIOS COMPARISON")
    print("="*100)

    print(f"\n{'Scenario':<25} {'Arrivals/Hr':<12} {'Runways':<10} {'Slot':<8} {'Load':<12}")
    print("-"*100)

    for scenario in scenarios:
        # Every aircraft needs two slots: one to land, one to take off
        busy_minutes_per_hour = scenario['ARRIVAL_FREQUENCY'] * 2 * scenario['SLOT_DURATION']
        load = busy_minutes_per_hour / (60 * scenario['RUNWAY_COUNT'])

        if load < 0.3:
            risk = "Low"
        elif load < 0.6:
            risk = "Medium"
        elif load < 0.9:
            risk = "High"
        else:
            risk = "Critical"

        print(f"{scenario['name']:<25} {scenario['ARRIVAL_FREQUENCY']:>6.1f}/hr    "
              f"{scenario['RUNWAY_COUNT']:>4}      {scenario['SLOT_DURATION']:>4}    {load*100:>5.1f}% {risk}")

    print("\n" + "="*100)
    for i, scenario in enumerate(scenarios, 1):
        print(f"\n{i}. {scenario['name']}")
        print(f"   {scenario['description']}")

    print("\n" + "="*100)


# ==============================================================================
# SIMULATION RUNNER
# ==============================================================================
def run_scenario(scenario_config, seed=1, verbose=True):
    """
    Run a single scenario simulation.

    Args:
        scenario_config: Dictionary with scenario parameters
        seed: Random seed for reproducibility
        verbose: Whether to print detailed statistics

    Returns:
        Dictionary with key performance indicators
    """
    if verbose:
        print(f"\n{'='*80}")
        print(f"RUNNING: {scenario_config['name']}")
        print(f"{'='*80}")
        print(f"Description: {scenario_config['description']}")
        print(f"{'='*80}\n")

    engine = SimulationEngine(scenario_parameters(scenario_config, seed=seed))
    engine.event_loop(scenario_config['HORIZON'])
    engine.compute_statistics(scenario_config['HORIZON'])

    if verbose:
        engine.print_statistics(verbose=True)
    return engine.get_kpis()


def run_all_scenarios(num_runs_per_scenario=1, base_seed=1, verbose=True):
    """
    Run all scenarios and compare results.

    Args:
        num_runs_per_scenario: Number of replications per scenario
        base_seed: Base seed for random number generation
        verbose: Whether to print detailed statistics for each run

    Returns:
        Dictionary mapping scenario name to the KPIs averaged over its runs
    """
    all_results = {}

    print("\n" + "="*100)
    print("RUNNING ALL SCENARIOS")
    print("="*100)
    print(f"Number of runs per scenario: {num_runs_per_scenario}")
    print(f"Base seed: {base_seed}")
    print("="*100)

    for scenario in get_all_scenarios():
        scenario_kpis = []
        for run in range(num_runs_per_scenario):
            seed = base_seed + run
            kpis = run_scenario(scenario, seed=seed, verbose=verbose and num_runs_per_scenario == 1)
            scenario_kpis.append(kpis)

        avg_kpis = {}
        for key in scenario_kpis[0].keys():
            values = [kpis[key] for kpis in scenario_kpis if kpis[key] is not None]
            avg_kpis[key] = float(np.mean(values)) if values else None
        all_results[scenario['name']] = avg_kpis

    print_comparison_table(all_results)
    return all_results


def print_comparison_table(results):
    """Prints KPI comparison across scenarios."""
    print("\n" + "="*100)
    print("SCENARIO KPI COMPARISON")
    print("="*100)
    print(f"{'Scenario':<25} {'Mean Runways':>14} {'Mean Airport':>14} {'Punctuality %':>15} {'Delayed Ops':>13}")
    print("-"*100)
    for name, kpis in results.items():
        cells = []
        for key in ('mean_on_runways', 'mean_on_airport', 'punctuality', 'delayed_operations'):
            value = kpis[key]
            cells.append("n/a" if value is None else f"{value:.2f}")
        print(f"{name:<25} {cells[0]:>14} {cells[1]:>14} {cells[2]:>15} {cells[3]:>13}")
    print("="*100 + "\n")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Run runway simulation scenarios')
    parser.add_argument('--mode', type=str, default='summary',
                        choices=['summary', 'single', 'all', 'compare'],
                        help='Run mode: summary (just show table), single (one scenario), all (run all), compare (multiple runs)')
    parser.add_argument('--scenario', type=int, default=1,
                        help='Scenario number (1-4) for single mode')
    parser.add_argument('--runs', type=int, default=1,
                        help='Number of runs per scenario for compare mode')
    parser.add_argument('--seed', type=int, default=1,
                        help='Random seed')

    args = parser.parse_args()

    if args.mode == 'summary':
        print_scenario_summary()

    elif args.mode == 'single':
        scenarios = get_all_scenarios()
        if 1 <= args.scenario <= len(scenarios):
            run_scenario(scenarios[args.scenario - 1], seed=args.seed, verbose=True)
        else:
            print(f"Error: Scenario number must be between 1 and {len(scenarios)}")

    elif args.mode == 'all':
        run_all_scenarios(num_runs_per_scenario=1, base_seed=args.seed, verbose=True)

    elif args.mode == 'compare':
        run_all_scenarios(num_runs_per_scenario=args.runs, base_seed=args.seed, verbose=False)
