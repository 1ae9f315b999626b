class HouseValidators:
    """Validation rules for house parameters"""

    @staticmethod
    def validate_house_dimensions(width: float, length: float) -> bool:
        """Validate the house footprint is reasonable"""
        if width < 4 or width > 200:
            raise ValueError("House width must be between 4m and 200m")
        if length < 4 or length > 200:
            raise ValueError("House length must be between 4m and 200m")
        return True

    @staticmethod
    def validate_floors(count: int) -> bool:
        """Validate floor count"""
        if count < 1 or count > 10:
            raise ValueError("Floors must be between 1 and 10")
        return True

    @staticmethod
    def validate_floor_position(floor_index: int, floor_count: int) -> bool:
        """Validate a floor index lies inside the house"""
        if floor_index < 1 or floor_index > floor_count:
            raise ValueError(f"Floor index must be between 1 and {floor_count}")
        return True

    @staticmethod
    def validate_plot(plot_width, plot_length) -> bool:
        """Validate plot dimensions are given together"""
        if (plot_width is None) != (plot_length is None):
            raise ValueError("Plot width and length must be given together")
        return True

    @staticmethod
    def validate_site_object(kind: str, width: float, depth: float) -> bool:
        """Validate a site object measured by its footprint has both sides"""
        if kind not in ('garage', 'carport') and (width <= 0 or depth <= 0):
            raise ValueError(f"Site object '{kind}' needs a positive width and depth")
        return True
