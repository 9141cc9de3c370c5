"""Tests for the recursive fork-join distribution builder."""
import logging
import threading
from math import prod

import pytest

from dicedist import distribution_of
from dicedist.core.dice import DiceSet
from dicedist.core.distribution import Distribution
from dicedist.core.errors import DistributionError
from dicedist.core.notation import parse_dice
from dicedist.engine import DistributionBuilder, EngineConfig, split_index


class TestSplitIndex:
    @pytest.mark.parametrize("length, expected", [
        (2, 1),
        (3, 2),
        (4, 2),
        (5, 4),
        (8, 4),
        (9, 8),
        (100, 64),
    ])
    def test_largest_power_of_two_below_length(self, length, expected):
        assert split_index(length) == expected


class TestEngineConfig:
    def test_defaults_spawn_at_every_split(self):
        config = EngineConfig()
        assert config.spawns_worker(2)
    
    def test_threshold(self):
        config = EngineConfig(parallel_threshold=8)
        assert not config.spawns_worker(7)
        assert config.spawns_worker(8)
    
    def test_sequential(self):
        assert not EngineConfig(parallel=False).spawns_worker(1000)
    
    def test_threshold_below_two_rejected(self):
        with pytest.raises(ValueError):
            EngineConfig(parallel_threshold=1)


class TestBuild:
    def get_builder(self, **kwargs):
        return DistributionBuilder(EngineConfig(**kwargs))
    
    def test_empty(self):
        dist = self.get_builder().build(DiceSet())
        assert dist.size == 0
        assert list(dist) == []
    
    def test_single_die(self):
        assert self.get_builder().build(DiceSet([12])) == Distribution.single_die(12)
    
    def test_two_d6(self):
        dist = distribution_of("2d6")
        assert (dist.min, dist.max, dist.size) == (2, 12, 11)
        assert list(dist) == [1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1]
    
    def test_two_d4(self):
        assert list(distribution_of("1d4 1d4")) == [1, 2, 3, 4, 3, 2, 1]
    
    def test_matches_direct_combination(self):
        two_d6 = distribution_of("2d6")
        d8 = distribution_of("1d8")
        direct = distribution_of("2d6 1d8")
        assert two_d6 + d8 == direct
        assert d8 + two_d6 == direct
    
    @pytest.mark.parametrize("notation", ["3d6", "2d4 3d8 1d20", "7d3", "1d2 1d3 1d5 1d7 1d11"])
    def test_conservation_and_range(self, notation):
        dist = distribution_of(notation)
        dice = parse_dice(notation)
        assert dist.total == prod(d.sides for d in dice)
        assert dist.min == len(dice)
        assert dist.max == sum(d.sides for d in dice)
        assert dist.n == len(dice)
        assert dist.is_symmetric()
    
    def test_large_set(self):
        dist = distribution_of("60d6")
        assert dist.total == 6 ** 60
        assert dist.size == 301
        assert dist.is_symmetric()
    
    @pytest.mark.parametrize("config", [
        EngineConfig(parallel=False),
        EngineConfig(parallel_threshold=4),
        EngineConfig(parallel_threshold=1000),
    ])
    def test_scheduling_does_not_change_result(self, config):
        notation = "3d4 2d6 5d10 1d20"
        assert distribution_of(notation, config) == distribution_of(notation)


class TestScheduling:
    def count_workers(self, monkeypatch):
        spawned = []
        original = DistributionBuilder._work
        
        def recording_work(self, dice, depth, channel):
            spawned.append((len(dice), threading.current_thread().name))
            original(self, dice, depth, channel)
        
        monkeypatch.setattr(DistributionBuilder, "_work", recording_work)
        return spawned
    
    def test_one_worker_per_split(self, monkeypatch):
        spawned = self.count_workers(monkeypatch)
        DistributionBuilder().build(DiceSet([6] * 4))
        # 4 -> (2, 2), each 2 -> (1, 1): three splits.
        assert len(spawned) == 3
        assert all(name.startswith("dicedist-") for _, name in spawned)
    
    def test_threshold_limits_workers(self, monkeypatch):
        spawned = self.count_workers(monkeypatch)
        DistributionBuilder(EngineConfig(parallel_threshold=3)).build(DiceSet([6] * 4))
        assert len(spawned) == 1
    
    def test_sequential_spawns_nothing(self, monkeypatch):
        spawned = self.count_workers(monkeypatch)
        DistributionBuilder(EngineConfig(parallel=False)).build(DiceSet([6] * 16))
        assert spawned == []


class TestFailures:
    def fail_on(self, monkeypatch, bad_sides):
        original = Distribution.single_die
        
        def single_die(cls, sides):
            if sides == bad_sides:
                raise RuntimeError(f"cannot build d{sides}")
            return original(sides)
        
        monkeypatch.setattr(Distribution, "single_die", classmethod(single_die))
    
    def test_worker_failure_is_fatal(self, monkeypatch):
        self.fail_on(monkeypatch, 8)
        # Split 1 + 1: the d8 lands on the worker thread.
        with pytest.raises(DistributionError) as excinfo:
            DistributionBuilder().build(DiceSet([4, 8]))
        assert isinstance(excinfo.value.__cause__, RuntimeError)
    
    def test_calling_thread_failure_is_fatal(self, monkeypatch):
        self.fail_on(monkeypatch, 4)
        with pytest.raises(DistributionError) as excinfo:
            DistributionBuilder().build(DiceSet([4, 8]))
        assert isinstance(excinfo.value.__cause__, RuntimeError)
    
    @pytest.mark.parametrize("bad_sides", [2, 5, 9, 13])
    def test_nested_failure_propagates(self, monkeypatch, bad_sides):
        self.fail_on(monkeypatch, bad_sides)
        with pytest.raises(DistributionError) as excinfo:
            DistributionBuilder().build(DiceSet(range(2, 14)))
        assert isinstance(excinfo.value.__cause__, RuntimeError)
    
    def test_sequential_failure_is_fatal(self, monkeypatch):
        self.fail_on(monkeypatch, 6)
        with pytest.raises(DistributionError):
            DistributionBuilder(EngineConfig(parallel=False)).build(DiceSet([4, 6, 8]))
    
    def test_severed_channel(self, monkeypatch):
        monkeypatch.setattr(DistributionBuilder, "_work", lambda self, dice, depth, channel: None)
        with pytest.raises(DistributionError, match="without producing"):
            DistributionBuilder().build(DiceSet([6, 6]))
    
    def test_worker_failure_is_logged(self, monkeypatch, caplog):
        self.fail_on(monkeypatch, 8)
        with caplog.at_level(logging.ERROR, logger="dicedist.engine.builder"):
            with pytest.raises(DistributionError):
                DistributionBuilder().build(DiceSet([4, 8]))
        assert "Worker for 1 dice at depth 1 failed" in caplog.text


def test_completed_build_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="dicedist.engine.builder"):
        distribution_of("2d6")
    assert "Built distribution of 2 dice: sums 2..12" in caplog.text
