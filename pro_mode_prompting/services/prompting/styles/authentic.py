# pro_mode_prompting/services/prompting/styles/authentic.py
# Influencer look: phone camera, portrait-mode background blur, candid framing.
# Keep camera-body and lens vocabulary out of these templates.

INTRO_AUTHENTIC = (
    "Authentic influencer-style photo of the person shown in the reference images. "
    "Keep them exactly recognizable with the same face, features, hair and body proportions; "
    "only the scene, outfit and pose change as described below."
)

INTRO_AUTHENTIC_NO_REFERENCE = (
    "Authentic influencer-style photo of one consistent subject with natural, real-life features. "
    "The scene, outfit and pose are described below."
)

CAMERA_AUTHENTIC = (
    "Camera: Shot on iPhone 15 Pro in portrait mode, natural bokeh softly blurring the background. "
    "Held about 1 meter from the subject at eye level or slightly above. "
    "Influencer selfie framing from the chest up with a slight natural tilt, "
    "visible skin texture and subtle grain for a candid, handheld feel."
)
