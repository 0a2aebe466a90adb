# Scenario D: an eight-hour day with two servers for the first two
# hours, four for the next three, and three for the last three.

import queuesim

args, _ = queuesim.parse_args()
src = queuesim.ExponentialSource(seed=args.seed if args.seed is not None else 97531)

cfg = queuesim.SimulationConfig(40.0, 15.0, servers=[(0, 2), (2, 4), (5, 3)], horizon=8.0)
r = queuesim.simulate(cfg, src)

def fmt(x):
    return "%-15s" % "n/a" if x is None else "%-15.6f" % x

print("changing servers with infinite queue:")
print("%-20s %-15s %-15s %-15s %-15s %-15s" %
      ("period", "avg wait", "avg sys time", "utilization", "avg queue len", "P(all busy)"))
for p in r.periods:
    print("%-20s %s %s %s %s %s" %
          ("%g-%g hours" % (p.start, p.stop), fmt(p.avg_waiting_time),
           fmt(p.avg_sojourn_time), fmt(p.utilization), fmt(p.avg_queue_length),
           fmt(p.prob_all_busy)))
print("%-20s %s %s %s %s %s" %
      ("entire day", fmt(r.avg_waiting_time), fmt(r.avg_sojourn_time),
       fmt(r.utilization), fmt(r.avg_queue_length), fmt(r.prob_all_busy)))
print("server-hours: %g" % r.server_hours)
