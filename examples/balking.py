# Scenario C: a single server serving 500 customers, who leave the
# line if they would have waited more than five minutes.

import queuesim

args, _ = queuesim.parse_args()
src = queuesim.ExponentialSource(seed=args.seed if args.seed is not None else 11223)

cfg = queuesim.SimulationConfig(10.0, 15.0, max_wait=5/60.0, arrivals=500)
sim = queuesim.simulator(cfg, src, name="balking")
r = sim.run()

print("coffee shop with balking customers (%s):" % cfg)
print("  avg wait time:   %.6f" % r.avg_waiting_time)
print("  avg sys time:    %.6f" % r.avg_sojourn_time)
print("  utilization:     %.6f" % r.utilization)
print("  idle fraction:   %.6f" % r.idle_fraction)
print("  avg queue len:   %.6f" % r.avg_queue_length)
print("  max queue len:   %d" % r.max_queue_length)
print("  P(empty queue):  %.6f" % r.prob_empty)
print("  customers lost:  %d" % r.balked)
if args.verbose or args.debug:
    sim.show_runtime_report('  ')
