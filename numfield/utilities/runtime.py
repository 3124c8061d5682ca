from tqdm import tqdm


class RuntimeConfiguration(object):
    """
    Process-wide presentation settings.
    """

    def __init__(self):
        self.field_symbol  = 'z'
        self.poly_symbol   = 'x'
        self.show_progress = False


    def report_progress(self, iterable, visual: bool=False, **kwargs):
        """
        Wraps `iterable` in a progress bar when progress reporting is on.

        Parameters:
            iterable (iterable): Iterable to wrap. `None` creates a manual progress bar.
            visual       (bool): Force the progress bar on for this call.

        Returns:
            iterable: `tqdm` instance (disabled unless progress is on).
        """
        return tqdm(iterable, disable=not (visual or self.show_progress), **kwargs)



RUNTIME = RuntimeConfiguration()
