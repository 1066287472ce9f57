"""
The :class:`UserOptionConfigured` mixin lets a posemath class take its settings from a :class:`.UserOptions`
dataclass, change them freely afterwards, and later return to the settings it was built with.

Example:
    :class:`.PoseAverager` is configured this way.  Its settings live on :class:`.PoseAveragerOptions` and are copied
    onto the averager as plain attributes::

        from posemath.rotations import PoseAverager, PoseAveragerOptions

        averager = PoseAverager(PoseAveragerOptions(fraction=0.25))
        averager.fraction = 0.75       # weight towards the second pose for a while
        h_i2c = averager(h_i2b, h_i2a)
        averager.reset_settings()      # back to fraction=0.25
        averager.original_options      # PoseAveragerOptions(fraction=0.25, degenerate_axis_threshold=1e-05)

    A new configurable class follows the same pattern as :class:`.PoseAverager`: inherit from
    ``UserOptionConfigured[SomeOptions]`` and ``SomeOptions``, then call ``super().__init__(SomeOptions,
    options=options)``.

.. Note::
    :class:`UserOptionConfigured` has to come before the options dataclass in the base class list so that its
    ``__init__`` runs first in the MRO.
"""

import copy

from typing import Generic, TypeVar

from posemath.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin that applies a :class:`.UserOptions` instance as attributes and can restore it with :meth:`reset_settings`.

    :param OptionsT: The :class:`UserOptions`-derived class type for configuration

    :attr original_options: The original configuration used during initialization.
                            This is stored as a deep copy and used for reset operations.

    When no options are given the defaults of ``options_type`` are used, so ``PoseAverager()`` averages at the midpoint
    with the standard degenerate axis threshold.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = copy.deepcopy(options)
        """
        The original configuration for this class
        """

    def reset_settings(self) -> None:
        """
        Resets the class to the state it was originally initialized with.
        """

        self.original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        Get the original configuration options.

        :returns: OptionsT: The original options used during initialization.
        """
        return self._original_options
