"""Line-scanning passes and the transform runner."""
