# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera looking from ``position`` towards ``look_at``.

    The viewport is a ``viewport_height`` tall rectangle placed ``focal``
    units in front of the camera. With ``orthographic`` set, every ray is
    shot along the view direction from its point on the viewport instead.
    """
    def __init__(self, position: Vector3, look_at: Vector3, aspect_ratio: float,
                 viewport_height: float = 1.0, focal: float = 1.0, orthographic: bool = False):
        self.position = position
        self.look_at = look_at
        self.aspect_ratio = aspect_ratio
        self.viewport_height = viewport_height
        self.focal = focal
        self.orthographic = orthographic
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        global_up = Vector3(0, 1, 0)

        self.forward = (self.look_at - self.position).normalize()
        self.right = self.forward.cross(global_up).normalize()
        self.up = self.right.cross(self.forward).normalize()

        viewport_width = self.viewport_height * self.aspect_ratio
        self.viewport_right = self.right * viewport_width
        self.viewport_down = self.up * -self.viewport_height

        self.viewport_top_left = (self.position
                                  - self.viewport_right * 0.5
                                  - self.viewport_down * 0.5
                                  + self.forward * self.focal)

    def get_ray(self, row_ratio: float, col_ratio: float) -> Ray:
        """
        Ray through the viewport point at (row_ratio, col_ratio), both in
        [0, 1] with row 0 at the top edge.
        """
        target = (self.viewport_top_left
                  + self.viewport_down * row_ratio
                  + self.viewport_right * col_ratio)
        if self.orthographic:
            return Ray(target, self.forward)
        return Ray(self.position, target - self.position)
