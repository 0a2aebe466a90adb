# Scenario B: a single server with a bounded line; we try line
# capacities from 3 to 7 and average each over repeated runs.

import queuesim

args, _ = queuesim.parse_args()
src = queuesim.ExponentialSource(seed=args.seed if args.seed is not None else 24680)

lam, mu, runs = 20.0, 24.0, 10
print("capacity analysis (lambda=%g, mu=%g, %d runs each):" % (lam, mu, runs))
print("%-10s %-15s %-15s %-15s %-15s %-15s %-15s" %
      ("capacity", "avg wait", "avg sys time", "utilization",
       "avg queue len", "P(full)", "P(rejection)"))
for cap in range(3, 8):
    cfg = queuesim.SimulationConfig(lam, mu, capacity=cap, horizon=100.0)
    r = queuesim.average_results(queuesim.simulate(cfg, s) for s in src.spawn(runs))
    print("%-10d %-15.6f %-15.6f %-15.6f %-15.6f %-15.6f %-15.6f" %
          (cap, r.avg_waiting_time, r.avg_sojourn_time, r.utilization,
           r.avg_queue_length, r.prob_full, r.prob_rejection))
