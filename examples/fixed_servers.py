# Scenario A: a coffee shop with a fixed number of servers and an
# unbounded line; we try one to four servers for a three-hour day.

import queuesim

args, _ = queuesim.parse_args()
src = queuesim.ExponentialSource(seed=args.seed if args.seed is not None else 13579)

lam, mu = 40.0, 15.0
print("server analysis (lambda=%g, mu=%g, infinite queue):" % (lam, mu))
print("%-10s %-15s %-15s %-15s %-15s" %
      ("servers", "avg wait", "avg sys time", "utilization", "avg queue len"))
for n in range(1, 5):
    cfg = queuesim.SimulationConfig(lam, mu, servers=n, horizon=3.0)
    r = queuesim.simulate(cfg, src)
    print("%-10d %-15.6f %-15.6f %-15.6f %-15.6f" %
          (n, r.avg_waiting_time, r.avg_sojourn_time, r.utilization, r.avg_queue_length))
