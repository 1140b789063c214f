from .RunConfig import RunConfig
from .DistributionSource import ParticleSource, ScalarSource


class DistributionSourceFactory(object):
    """
    Factory for creating the distribution source a run needs.

    Dispatches on the execution mode of the supplied ``RunConfig``:
    Monte Carlo runs draw scalars, native runs draw particle ensembles.
    The evaluator and sampler are unaffected by the choice.

    Methods
    -------
    create(config)
        Construct and return a distribution source.

    Examples
    --------
    >>> source = DistributionSourceFactory.create(RunConfig(iterations=1000))
    >>> source.distributional
    False
    """

    @staticmethod
    def create(config: RunConfig):
        """
        Construct a distribution source from a run config.

        Parameters
        ----------
        config : RunConfig
            A validated run configuration.

        Returns
        -------
        ScalarSource or ParticleSource
            ``ScalarSource`` in Monte Carlo mode, ``ParticleSource``
            otherwise.

        Raises
        ------
        ValueError
            If *config* is not a ``RunConfig``.
        """
        if not isinstance(config, RunConfig):
            raise ValueError(f"Unsupported run config: {type(config)}")

        if config.is_monte_carlo:
            return ScalarSource(seed=config.seed)
        return ParticleSource(particles=config.particles, seed=config.seed)
