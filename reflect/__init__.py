"""
Build objects from constructor expressions such as

	Resample(Momentum(SMA,[100,50,20],[0.2,0.3,0.5]),900)

and call their members by name. See reflect.api for the outward face.
"""
