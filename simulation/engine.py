"""
Game Simulation Engine

Weighted-random simulation of a single hockey game: three regulation
periods shot by shot, then a 3-on-3 overtime draw and a shootout if the
game is still tied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from loguru import logger

from league.models.player import Player, rating_of
from league.models.team import Team
from simulation.exceptions import PreconditionError
from simulation.models import (
    EventType,
    GameEvent,
    GameResult,
    PeriodResult,
    PlayerGameStats,
    SimulationConfig,
    TiebreakWinner,
)
from simulation.random_source import RandomSource, choice, draw, make_rng, randint, sample
from simulation.stars import rank_stars
from simulation.strength import TeamStrengthEvaluator

HOME = "home"
AWAY = "away"


@dataclass
class TeamContext:
    """One side of the game, fixed for the duration of a simulation."""

    side: str
    team: Team
    strength: float
    skaters: list[Player]

    @property
    def team_id(self) -> str:
        return self.team.team_id

    @property
    def name(self) -> str:
        return self.team.name


@dataclass
class GameContext:
    """Mutable state of one simulation call."""

    home: TeamContext
    away: TeamContext
    rng: RandomSource
    events: list[GameEvent] = field(default_factory=list)
    stats: dict[str, PlayerGameStats] = field(default_factory=dict)

    def credit(self, player: Player, side: TeamContext, **increments: int) -> None:
        """Add to a player's box score line, creating it on first use."""
        line = self.stats.get(player.player_id)
        if line is None:
            line = PlayerGameStats(player_id=player.player_id, team_id=side.team_id)
        self.stats[player.player_id] = replace(
            line, **{name: getattr(line, name) + n for name, n in increments.items()}
        )


class GameSimulator:
    """
    Weighted-random hockey game simulator.

    Holds only configuration; every call to ``simulate`` builds its own
    context, so one instance can serve many games, including concurrently.
    """

    REGULATION_PERIODS = 3
    OVERTIME_PERIOD = 4
    SHOOTOUT_PERIOD = 5

    def __init__(
        self,
        config: SimulationConfig | None = None,
        strength_evaluator: TeamStrengthEvaluator | None = None,
    ) -> None:
        """
        Initialize the simulator.

        Args:
            config: Simulation constants (defaults to the standard game model)
            strength_evaluator: Team strength calculator
        """
        self.config = config or SimulationConfig()
        self.strength_evaluator = strength_evaluator or TeamStrengthEvaluator(self.config)

    def simulate(
        self,
        home_team: Team,
        away_team: Team,
        rng: RandomSource | None = None,
    ) -> GameResult:
        """
        Simulate a complete game.

        Args:
            home_team: Home team
            away_team: Away team
            rng: Random source; a generator seeded from config.random_seed
                is created when omitted

        Returns:
            GameResult with periods, play-by-play and stars

        Raises:
            PreconditionError: If a team is missing, or a roster has no
                skaters while reject_empty_rosters is set
        """
        self._validate(home_team, "home")
        self._validate(away_team, "away")

        if rng is None:
            rng = make_rng(self.config.random_seed)

        home = TeamContext(
            side=HOME,
            team=home_team,
            strength=self.strength_evaluator.evaluate(home_team),
            skaters=home_team.skaters,
        )
        away = TeamContext(
            side=AWAY,
            team=away_team,
            strength=self.strength_evaluator.evaluate(away_team),
            skaters=away_team.skaters,
        )
        ctx = GameContext(home=home, away=away, rng=rng)

        logger.info(
            f"Simulating {home.name} ({home.strength:.1f}) vs "
            f"{away.name} ({away.strength:.1f})"
        )

        periods: list[PeriodResult] = []
        for period in range(1, self.REGULATION_PERIODS + 1):
            periods.append(self._simulate_period(ctx, period))

        home_score = sum(p.home_goals for p in periods)
        away_score = sum(p.away_goals for p in periods)
        overtime_winner = TiebreakWinner.NONE
        shootout_winner = TiebreakWinner.NONE

        if home_score == away_score:
            overtime_winner, shootout_winner = self._resolve_tie(ctx)
            if TiebreakWinner.HOME in (overtime_winner, shootout_winner):
                home_score += 1
            else:
                away_score += 1

        stars = rank_stars(home_team.players + away_team.players, ctx.stats, self.config)

        result = GameResult(
            home_score=home_score,
            away_score=away_score,
            home_shots=sum(p.home_shots for p in periods),
            away_shots=sum(p.away_shots for p in periods),
            periods=tuple(periods),
            overtime_winner=overtime_winner,
            shootout_winner=shootout_winner,
            play_by_play=tuple(ctx.events),
            home_team_strength=home.strength,
            away_team_strength=away.strength,
            stars=tuple(stars),
            player_stats=dict(ctx.stats),
        )

        suffix = ""
        if result.overtime_winner != TiebreakWinner.NONE:
            suffix = " (OT)"
        elif result.shootout_winner != TiebreakWinner.NONE:
            suffix = " (SO)"
        logger.info(
            f"Final: {home.name} {result.home_score} - "
            f"{away.name} {result.away_score}{suffix}"
        )
        return result

    def _validate(self, team: Team | None, side: str) -> None:
        """Check the structural preconditions for one side."""
        if team is None:
            raise PreconditionError(f"{side} team is required")
        if not isinstance(team, Team):
            raise PreconditionError(
                f"{side} team must be a Team, got {type(team).__name__}"
            )
        if not team.skaters:
            if self.config.reject_empty_rosters:
                raise PreconditionError(f"{side} team '{team.name}' has no skaters")
            logger.warning(
                f"{side} team '{team.name}' has no skaters; it will not register shots"
            )

    # ------------------------------------------------------------------
    # Regulation
    # ------------------------------------------------------------------

    def _simulate_period(self, ctx: GameContext, period: int) -> PeriodResult:
        """Simulate one regulation period."""
        minutes = self.config.period_minutes
        self._emit(ctx, "00:00", period, EventType.PERIOD_START, f"Start of Period {period}")

        home_shots = self._shot_volume(ctx, ctx.home)
        away_shots = self._shot_volume(ctx, ctx.away)

        home_goals = sum(self._resolve_shot(ctx, ctx.home, period) for _ in range(home_shots))
        away_goals = sum(self._resolve_shot(ctx, ctx.away, period) for _ in range(away_shots))

        self._maybe_penalty(ctx, period)
        self._maybe_hit(ctx, period)

        self._emit(ctx, f"{minutes:02d}:00", period, EventType.PERIOD_END, f"End of Period {period}")

        logger.debug(
            f"Period {period}: goals {home_goals}-{away_goals}, "
            f"shots {home_shots}-{away_shots}"
        )
        return PeriodResult(
            period=period,
            home_goals=home_goals,
            away_goals=away_goals,
            home_shots=home_shots,
            away_shots=away_shots,
        )

    def _shot_volume(self, ctx: GameContext, side: TeamContext) -> int:
        """Shots a team takes in one period (0 without skaters)."""
        if not side.skaters:
            return 0

        cfg = self.config
        shots: float = (
            cfg.base_shots_per_period
            + math.floor((side.strength - 50) / cfg.shot_strength_divisor)
            + randint(ctx.rng, cfg.shot_variance + 1)
        )
        if side.team.strategy is not None:
            shots *= 0.8 + side.team.strategy.offensive_style / 100
        return max(cfg.min_shots_per_period, math.floor(shots))

    def _resolve_shot(self, ctx: GameContext, side: TeamContext, period: int) -> int:
        """
        Resolve one shot by a randomly chosen skater.

        Returns:
            1 on a goal, else 0
        """
        cfg = self.config
        shooter = choice(ctx.rng, side.skaters)
        ctx.credit(shooter, side, shots=1)

        shooter_skill = (rating_of(shooter, "shooting") + rating_of(shooter, "puck_control")) / 2
        situational = rating_of(shooter, "poise") / 100 if period == 3 else 1.0
        base_pct = cfg.base_shooting_pct + (shooter_skill - 50) / cfg.shooting_skill_divisor
        # Deliberately unclamped: extreme ratings may push this outside [0, 1]
        adjusted_pct = base_pct * situational * (side.strength / cfg.strength_reference)

        if draw(ctx.rng) >= adjusted_pct:
            return 0

        ctx.credit(shooter, side, goals=1)

        assist_count = 0
        if draw(ctx.rng) < cfg.assist_probability:
            assist_count = 2 if draw(ctx.rng) < cfg.second_assist_probability else 1
        others = [p for p in side.skaters if p.player_id != shooter.player_id]
        assisters = sample(ctx.rng, others, assist_count)
        for assister in assisters:
            ctx.credit(assister, side, assists=1)

        if assisters:
            assist_text = "Assists: " + ", ".join(p.full_name for p in assisters)
        else:
            assist_text = "(Unassisted)"
        self._emit(
            ctx,
            self._random_clock(ctx, cfg.period_minutes),
            period,
            EventType.GOAL,
            f"GOAL! {shooter.full_name} ({side.name}) {assist_text}",
            player=shooter,
            side=side,
            assist_ids=tuple(p.player_id for p in assisters),
        )
        return 1

    def _maybe_penalty(self, ctx: GameContext, period: int) -> None:
        """Roll for a penalty; low-discipline skaters are called more often."""
        if draw(ctx.rng) >= self.config.penalty_probability:
            return
        side, player = self._pick_skater(ctx)
        if player is None:
            return
        trigger_probability = 1 - rating_of(player, "discipline") / 100
        if draw(ctx.rng) >= trigger_probability:
            return

        ctx.credit(player, side, penalties=1)
        self._emit(
            ctx,
            self._random_clock(ctx, self.config.period_minutes),
            period,
            EventType.PENALTY,
            f"Penalty: {player.full_name} ({side.name}), 2 minutes",
            player=player,
            side=side,
        )

    def _maybe_hit(self, ctx: GameContext, period: int) -> None:
        """Roll for a big hit by a strong checker."""
        if draw(ctx.rng) >= self.config.hit_probability:
            return
        side, player = self._pick_skater(ctx)
        if player is None:
            return
        if rating_of(player, "checking") <= self.config.hit_checking_threshold:
            return

        ctx.credit(player, side, hits=1)
        self._emit(
            ctx,
            self._random_clock(ctx, self.config.period_minutes),
            period,
            EventType.HIT,
            f"Big hit by {player.full_name} ({side.name})",
            player=player,
            side=side,
        )

    def _pick_skater(self, ctx: GameContext) -> tuple[TeamContext, Player | None]:
        """Pick a side 50/50, then one of its skaters uniformly."""
        side = ctx.home if draw(ctx.rng) < 0.5 else ctx.away
        if not side.skaters:
            return side, None
        return side, choice(ctx.rng, side.skaters)

    # ------------------------------------------------------------------
    # Tiebreaks
    # ------------------------------------------------------------------

    def _resolve_tie(self, ctx: GameContext) -> tuple[TiebreakWinner, TiebreakWinner]:
        """
        Break a regulation tie.

        Returns:
            (overtime_winner, shootout_winner); exactly one is not NONE
        """
        cfg = self.config
        period = self.OVERTIME_PERIOD
        self._emit(ctx, "00:00", period, EventType.PERIOD_START, "Start of Overtime (3-on-3)")

        home_ot = ctx.home.strength * cfg.overtime_strength_multiplier
        away_ot = ctx.away.strength * cfg.overtime_strength_multiplier

        if draw(ctx.rng) < cfg.overtime_decision_probability:
            home_wins = draw(ctx.rng) < 0.5 + (home_ot - away_ot) / cfg.overtime_strength_divisor
            side = ctx.home if home_wins else ctx.away
            scorer = choice(ctx.rng, side.skaters) if side.skaters else None
            if scorer is not None:
                ctx.credit(scorer, side, goals=1)
                description = f"OVERTIME GOAL! {scorer.full_name} ({side.name})"
            else:
                description = f"OVERTIME GOAL! {side.name}"
            self._emit(
                ctx,
                self._random_clock(ctx, cfg.overtime_minutes),
                period,
                EventType.GOAL,
                description,
                player=scorer,
                side=side,
            )
            logger.debug(f"Overtime won by {side.name}")
            return TiebreakWinner(side.side), TiebreakWinner.NONE

        return TiebreakWinner.NONE, self._shootout(ctx)

    def _shootout(self, ctx: GameContext) -> TiebreakWinner:
        """Decide a shootout at team-strength level."""
        cfg = self.config
        period = self.SHOOTOUT_PERIOD
        home_shooters = self.shootout_order(ctx.home.skaters)
        away_shooters = self.shootout_order(ctx.away.skaters)

        self._emit(ctx, "SO", period, EventType.SHOOTOUT_START, "Shootout")

        home_wins = (
            draw(ctx.rng)
            < 0.5 + (ctx.home.strength - ctx.away.strength) / cfg.shootout_strength_divisor
        )
        side, shooters = (ctx.home, home_shooters) if home_wins else (ctx.away, away_shooters)
        shooter = shooters[0] if shooters else None

        # Shootout goals decide the game but are not credited to the shooter's line
        if shooter is not None:
            description = f"Shootout winner: {shooter.full_name} ({side.name})"
        else:
            description = f"Shootout winner: {side.name}"
        self._emit(
            ctx,
            "SO",
            period,
            EventType.SHOOTOUT_GOAL,
            description,
            player=shooter,
            side=side,
        )
        logger.debug(f"Shootout won by {side.name}")
        return TiebreakWinner(side.side)

    def shootout_order(self, skaters: list[Player]) -> list[Player]:
        """Top shooters by shooting + poise, best first (stable on ties)."""
        ranked = sorted(
            skaters,
            key=lambda p: rating_of(p, "shooting") + rating_of(p, "poise"),
            reverse=True,
        )
        return ranked[: self.config.shootout_shooters]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _random_clock(self, ctx: GameContext, minutes: int) -> str:
        """Pseudo-random MM:SS elapsed-time label within a period."""
        seconds = randint(ctx.rng, minutes * 60)
        return f"{seconds // 60:02d}:{seconds % 60:02d}"

    def _emit(
        self,
        ctx: GameContext,
        time: str,
        period: int,
        event_type: EventType,
        description: str,
        player: Player | None = None,
        side: TeamContext | None = None,
        assist_ids: tuple[str, ...] = (),
    ) -> None:
        ctx.events.append(
            GameEvent(
                time=time,
                period=period,
                event_type=event_type,
                description=description,
                player_id=player.player_id if player is not None else None,
                team_id=side.team_id if side is not None else None,
                assist_ids=assist_ids,
            )
        )


def simulate_game(
    home_team: Team,
    away_team: Team,
    rng: RandomSource | None = None,
    config: SimulationConfig | None = None,
) -> GameResult:
    """Simulate one game with a throwaway simulator."""
    return GameSimulator(config).simulate(home_team, away_team, rng)
