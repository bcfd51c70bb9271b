"""Default priority list surfaced first in the no-query picker view."""

from __future__ import annotations

DEFAULT_TOP_SYMBOLS: tuple[str, ...] = (
    "eraser.fill",
    "trash.fill",
    "folder.fill",
    "tray.fill",
    "tray.2.fill",
    "externaldrive.fill",
    "archivebox",
    "archivebox.fill",
    "xmark.bin.fill",
    "document.on.clipboard",
    "heart.text.clipboard.fill",
    "calendar",
    "books.vertical.fill",
    "book.closed.fill",
    "character.book.closed.fill",
    "magazine.fill",
    "bookmark.fill",
    "graduationcap.fill",
    "backpack.fill",
    "link",
    "person.fill",
    "lanyardcard.fill",
    "person.crop.square.on.square.angled",
    "person.crop.rectangle.stack.fill",
    "figure.stand.dress",
    "figure.arms.open",
    "oar.2.crossed",
    "dumbbell.fill",
    "soccerball.inverse",
    "baseball.fill",
    "basketball.fill",
    "american.football.fill",
    "american.football.professional.fill",
    "tennis.racket",
    "tennisball.fill",
    "volleyball.fill",
    "skateboard",
    "snowboard.fill",
    "trophy.fill",
    "keyboard.fill",
    "sun.max.fill",
    "moon.fill",
    "moon.circle.fill",
    "cloud.fill",
    "cloud.circle.fill",
    "cloud.moon.fill",
    "wind.snow",
    "snowflake",
    "tornado.circle.fill",
    "thermometer.variable",
    "thermometer.medium",
    "fire.extinguisher.fill",
    "beach.umbrella.fill",
    "umbrella",
    "microphone.fill",
    "shield.lefthalf.filled",
    "flag.pattern.checkered",
    "bell.fill",
    "tag.fill",
    "camera.fill",
    "message.fill",
    "checkmark.message.fill",
    "ellipsis.message.fill",
    "bubble.right.fill",
    "exclamationmark.bubble.fill",
    "quote.closing",
    "translate",
    "phone.fill",
    "video.fill",
    "envelope.front.fill",
    "envelope.fill",
    "bag.fill",
    "basket",
    "creditcard",
    "creditcard.fill",
    "wallet.pass",
    "wallet.pass.fill",
    "wallet.bifold",
    "wallet.bifold.fill",
    "dice.fill",
    "die.face.5.fill",
    "pianokeys.inverse",
    "paintbrush.fill",
    "paintbrush.pointed.fill",
    "wrench.adjustable.fill",
    "hammer.fill",
    "screwdriver.fill",
    "wrench.and.screwdriver.fill",
    "scroll.fill",
    "printer",
    "printer.fill",
    "handbag.fill",
    "latch.2.case.fill",
    "cross.case.fill",
    "suitcase.fill",
    "suitcase.rolling.fill",
    "puzzlepiece.fill",
    "lightbulb.fill",
    "fan.fill",
    "lamp.desk.fill",
    "lamp.floor.fill",
    "chair.lounge.fill",
    "fireplace.fill",
    "stove.fill",
    "robotic.vacuum.fill",
    "toilet.fill",
    "tent",
    "signpost.right.fill",
    "lock",
    "lock.fill",
    "pin.fill",
    "sensor.tag.radiowaves.forward.fill",
    "watch.analog",
    "headphones",
    "radio.fill",
    "airplane",
    "car",
    "car.rear",
    "bus.fill",
    "tram",
    "sailboat",
    "sailboat.fill",
    "truck.box.fill",
    "bicycle",
    "moped.fill",
    "fuelpump.fill",
    "key.card.fill",
    "horn.fill",
    "lungs.fill",
    "facemask.fill",
    "pill.fill",
    "pills.fill",
    "tortoise.fill",
    "dog.fill",
    "cat.fill",
    "bird.fill",
    "ant.fill",
    "ladybug.fill",
    "fish.fill",
    "pawprint.fill",
    "teddybear.fill",
    "tree.fill",
    "crown.fill",
    "hat.widebrim.fill",
    "hat.cap.fill",
    "tshirt.fill",
    "jacket",
    "jacket.fill",
    "shoe.fill",
    "shoe.2",
    "face.smiling.inverse",
    "eyes.inverse",
    "comb.fill",
    "sunglasses.fill",
    "hearingdevice.ear.fill",
    "hand.raised.fingers.spread.fill",
    "hands.clap.fill",
    "shippingbox.fill",
    "deskclock.fill",
    "alarm.fill",
    "gamecontroller.fill",
    "paintpalette",
    "swatchpalette.fill",
    "cup.and.saucer.fill",
    "cup.and.heat.waves.fill",
    "mug.fill",
    "takeoutbag.and.cup.and.straw.fill",
    "wineglass.fill",
    "birthday.cake",
    "birthday.cake.fill",
    "carrot.fill",
    "fork.knife",
    "waveform.circle.fill",
    "simcard.fill",
    "scalemass.fill",
    "fossil.shell.fill",
    "gift.fill",
    "hourglass",
    "binoculars.fill",
    "battery.75percent",
    "exclamationmark.shield.fill",
)
