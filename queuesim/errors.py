# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 3, 2026
# Last Update: Time-stamp: <2026-10-12 10:21:07 liux>
###############################################################

"""Exceptions raised by the queueing simulator."""

__all__ = ["QueueSimError", "ConfigurationError", "InvariantViolation",
           "DegenerateResultError"]

class QueueSimError(Exception):
    """The base class for all errors raised by queuesim."""

class ConfigurationError(QueueSimError, ValueError):
    """The simulation is configured with bad parameters (non-positive
    rates, capacity or balking threshold, or a malformed server
    schedule). It's raised before any event is processed."""

class InvariantViolation(QueueSimError, RuntimeError):
    """The internal state of the simulator has been corrupted, for
    example, assigning a customer to a busy server or releasing an idle
    one. This is a programming error and must never be ignored since
    the collected statistics can no longer be trusted."""

class DegenerateResultError(QueueSimError, ArithmeticError):
    """The statistics cannot be reduced because there is not enough data:
    no customer has completed service, or no time has elapsed."""
